# main.py
import sys

from cafe_sim.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
