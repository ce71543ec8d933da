from shunting_yard.cli import main

raise SystemExit(main())
