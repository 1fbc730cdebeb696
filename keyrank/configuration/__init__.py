"""Module implementing the configuration class and factories.

The Config object informs the app of the kind of ranking to
perform and of where to read and write the document fields.
The factories return the default configurations.
"""
