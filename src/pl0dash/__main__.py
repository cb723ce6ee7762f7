import sys

from pl0dash.cli import main

sys.exit(main())
