"""Allow running as: python -m wav_normalizer"""

import sys

from .cli import main

sys.exit(main())
