"""Framework integrations for pyplayground.

Import the submodules directly; each one needs its framework installed.
"""
