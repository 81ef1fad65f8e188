import sys

from trade_forms.cli import main

sys.exit(main())
