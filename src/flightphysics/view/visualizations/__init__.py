"""
Auto-import all visualization modules to ensure registration side-effects run.

After importing this package, `registry.list_keys()` and `registry.create_visualization()`
will know about every canvas.
"""
from __future__ import annotations

import importlib
import pkgutil

from flightphysics.view import visualizations as _visualizations_pkg

for _module in pkgutil.iter_modules(_visualizations_pkg.__path__, _visualizations_pkg.__name__ + "."):
    importlib.import_module(_module.name)
