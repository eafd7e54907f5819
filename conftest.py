import os
import sys

# Tests import the package as `src.numru`; make the repository root importable.
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
