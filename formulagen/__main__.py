from formulagen.cli import main

raise SystemExit(main())
