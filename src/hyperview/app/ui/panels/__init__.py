"""
Auto-import all shape editor modules to ensure registration side-effects run.

After importing this package, `registry.list_kinds()` and `registry.create_editor()`
will know about every shape kind that has an editor.
"""
from __future__ import annotations

import importlib
import pkgutil

from hyperview.app.ui.panels import shape_editors as _editors_pkg

for _module in pkgutil.iter_modules(_editors_pkg.__path__, _editors_pkg.__name__ + "."):
    importlib.import_module(_module.name)
