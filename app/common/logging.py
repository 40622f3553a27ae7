import logging

from app.common.config import config


_FORMAT = '%(asctime)s|%(name)s.%(funcName)s|%(levelname)s: %(message)s'


def _configure(logger: logging.Logger, level: str) -> None:
    """Attach the app handler to the logger unless it's already there.

    The Lambda runtime reuses the interpreter between invocations, so module
    reloads must not add a second handler.
    """
    logger.setLevel(level)
    # The Lambda runtime installs its own handler on the root logger.
    logger.propagate = False
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)


# Can't put into `app.__init__`, because that would cause circular dependency
# with `app.common.config`.
_configure(logging.getLogger('app'), config.log_level)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module name.

    The purpose of this function is to make sure that the hierarchical
    configuration is applied.

    Args:
        name: The module name (eg. __name__ for current module.)

    Returns:
        The logger.

    """
    return logging.getLogger(name)
