import sys

from geyserhub.main import main

sys.exit(main())
