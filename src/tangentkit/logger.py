"""Contains the name for the logger of TangentKit modules.

``tangentkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Run configuration and progress of the extrapolation loop.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a command-line value
    that was only partially understood.

By default, only messages of level ``WARNING`` are displayed, and they go to
standard error so the tabulated results on standard output stay clean.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``tangentkit.logger.tangentkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "tangentkit"
tangentkit_logger = logging.getLogger(logger_name)
