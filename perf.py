# Convenience entry point; the installed console script is `perf`

import sys
from perf_meter.cli import main


if __name__ == "__main__":
    sys.exit(main())
