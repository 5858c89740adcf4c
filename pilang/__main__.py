from pilang.cli import main

raise SystemExit(main())
