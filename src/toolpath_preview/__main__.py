import sys

from toolpath_preview.cli import main

sys.exit(main())
