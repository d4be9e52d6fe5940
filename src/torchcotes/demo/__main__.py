from torchcotes.demo._cli import main

raise SystemExit(main())
