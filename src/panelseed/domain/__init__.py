"""Domain model for PANELSEED.

Plain value types for the panel records this project provisions and reads
(admin principal, zone, resource node, port allocation) and the error
taxonomy shared by every layer.

Dependency rule: this package must not import from any other `panelseed.*`
package.
"""
