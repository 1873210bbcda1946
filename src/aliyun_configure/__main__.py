"""Allow ``python -m aliyun_configure``."""

import sys

from aliyun_configure.cli.main import main

sys.exit(main())
