from wordsite.main import main

raise SystemExit(main())
