from golden.cli import main

raise SystemExit(main())
