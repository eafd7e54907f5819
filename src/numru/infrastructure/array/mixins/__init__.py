"""
Behavior mixins composed into the concrete `Array`.
"""
