"""
Print spec assembly.

Turns a map snapshot (view + layer stack) into the declarative document consumed by
the print service. Entry points live in `printspec.build` and `printspec.service`.
"""
