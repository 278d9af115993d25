from site_smoke.cli import main

raise SystemExit(main())
