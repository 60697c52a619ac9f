from cartmerge.cli.main import main

raise SystemExit(main())
