from arcmini.main import main

raise SystemExit(main())
