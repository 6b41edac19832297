import sys

from ecsbench.bench.cli import main

sys.exit(main())
