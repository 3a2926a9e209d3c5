from computer_adapter.cli import main

raise SystemExit(main())
