
import logging
from typing import Any, Optional, Sequence

import numpy as np
from tabulate import tabulate

from ssection.core.defaults import TABLE_DECIMALS


class LoggerMixin:
    """
    A mixin class providing a class-specific logger.

    Parameters
    ----------
    debug : bool, optional
        Enables debug-level logging output to ``stderr`` if True.
        Default is False.

    Attributes
    ----------
    logger : logging.Logger
        A logger named ``<module>.<class>``.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            # only one stream handler per logger
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger


def table_properties(
    rows: Sequence[Sequence[float]],
    headers: Sequence[str],
    labels: Optional[Sequence[str]] = None,
    decimals: int = TABLE_DECIMALS,
) -> str:
    """Render rows of section values as a grid table.

    Parameters
    ----------
    rows : sequence of sequence of float
        One row of values per entry, each as long as ``headers``.
    headers : sequence of str
        Column names.
    labels : sequence of str, optional
        Leading label per row. If omitted, rows are numbered from 1.
    decimals : int, optional
        Number of decimals of the printed floats.

    Returns
    -------
    str
        The table as produced by :func:`tabulate.tabulate` in ``grid``
        format.
    """
    if labels is None:
        labels = [str(i + 1) for i in range(len(rows))]

    data = [
        [label] + np.asarray(row, dtype=float).flatten().tolist()
        for label, row in zip(labels, rows)
    ]
    return tabulate(data, headers=[""] + list(headers), tablefmt="grid",
                    floatfmt=f".{decimals}f")
