"""
IPython/Jupyter key-completion support for bracket-style access:

    catalog["Claude M<TAB>

Catalog already implements `_ipython_key_completions_`; this hook adds
prefix completion for older shells and for attribute chains such as
`session.catalog["...`. Import the module once to register it.
"""

import re
from IPython import get_ipython
from wikiart.catalog import Catalog


def completion_for_catalog(self, event):
    """
    Return cached artist names for expressions of the form:

        <catalog>["<prefix>
        <object>.<catalog>["<prefix>

    Only triggers when the indexed object is a Catalog.
    """

    line = event.line

    match = re.search(r'(\w+)(?:\.(\w+))?\["([^"]*)$', line)
    if not match:
        return []

    var_name, attr_name, prefix = match.groups()

    shell = get_ipython()
    if shell is None:
        return []

    base_obj = shell.user_ns.get(var_name)
    if base_obj is None:
        return []

    catalog = getattr(base_obj, attr_name, None) if attr_name else base_obj
    if not isinstance(catalog, Catalog):
        return []

    # Prefix-based completion (not fuzzy)
    return [name for name in catalog.names() if name.startswith(prefix)]


# Register the completer with IPython
ip = get_ipython()
if ip:
    ip.set_hook("complete_command", completion_for_catalog)
