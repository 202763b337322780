"""
Admin console client

Editable drafts, the pure reconciliation reducer, the HTTP gateway to the
slider API and the store that ties them together. Import from the
submodules directly.
"""
