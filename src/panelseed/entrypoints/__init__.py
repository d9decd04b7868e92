"""Entrypoints (inbound adapters) for PANELSEED.

Expose the application to the outside world through the ``panelseed`` CLI.
Parse and validate inputs, open the store through `panelseed.bootstrap`,
call the service layer, and present results.

Dependency rule: may import `panelseed.bootstrap` and
`panelseed.service_layer`; avoid importing `panelseed.adapters` directly.
"""
