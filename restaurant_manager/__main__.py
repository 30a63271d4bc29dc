# __main__.py
import sys

from restaurant_manager.main import main

sys.exit(main())
