import os
import sys

# Ensure repo-local imports (e.g. `import scacchi`) resolve without installing.
_REPO_ROOT = os.path.abspath(os.path.dirname(__file__))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)
