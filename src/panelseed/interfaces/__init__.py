"""Interfaces (application boundary) for PANELSEED.

Defines framework-free application contracts: repository ABCs, the unit of
work, and the password/secret/token ports used by the service layer.

Dependency rule: this package may only import `panelseed.domain`. It may be
imported by `panelseed.service_layer`, `panelseed.adapters`, and
`panelseed.bootstrap`.
"""
