from pokedex.cli import main

raise SystemExit(main())
