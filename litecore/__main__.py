"""Run the LiteCoreDB shell with python -m litecore."""

import sys

from litecore.repl import main

sys.exit(main())
