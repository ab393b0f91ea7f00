from robotest.cli.main import main

raise SystemExit(main())
