"""Allow running the package with python -m ptgen (same as the ptgen console script)."""
from ptgen.main import main
import sys
sys.exit(main())
