from kv_fetch.cli import main

raise SystemExit(main())
