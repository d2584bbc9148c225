from hal.main import main

raise SystemExit(main())
