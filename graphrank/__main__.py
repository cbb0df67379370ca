from graphrank.cli.main import main

raise SystemExit(main())
