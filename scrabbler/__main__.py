from scrabbler.cli import main

raise SystemExit(main())
