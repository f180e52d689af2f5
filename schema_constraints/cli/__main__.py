from schema_constraints.cli.main import main

raise SystemExit(main())
