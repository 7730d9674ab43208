"""
Save/load of the whole Store to a flat text file.

Layout, in this order, each section prefixed with its record count:
vehicles, customers, active rentals, history. Saving is explicit (menu or
exit prompt). Loading is best-effort: a line that cannot be rebuilt is
logged and skipped, the rest of the file still loads. Lines are decoded
one at a time, so a line in another encoding only drops that record.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterator, Optional

from ..exceptions import InvalidArgumentError, PersistenceError
from ..models.codec import (
    decode_customer,
    decode_rental,
    decode_vehicle,
    encode_customer,
    encode_rental,
    encode_vehicle,
)
from ..models.store import Store
from .customer_service import CustomerService
from .rental_service import RentalService
from .vehicle_service import VehicleService

logger = logging.getLogger(__name__)


class PersistenceService:
    """Write and read the four count-prefixed sections of the data file."""

    @staticmethod
    def dump_lines(store: Store) -> list[str]:
        lines = [str(len(store.vehicles))]
        lines += [encode_vehicle(v) for v in store.vehicles.values()]
        lines.append(str(len(store.customers)))
        lines += [encode_customer(c) for c in store.customers.values()]
        lines.append(str(len(store.rentals)))
        lines += [encode_rental(r) for r in store.rentals.values()]
        lines.append(str(len(store.history)))
        lines += list(store.history)
        return lines

    @staticmethod
    def save(store: Store, path: Optional[str] = None) -> str:
        """
        Write the store to `path` (default: store.path) and return the path.
        The file is written to a temp file first and then replaced.
        Raises PersistenceError when the file cannot be opened.
        """
        path = str(path or store.path)
        tmp = path + ".tmp"
        payload = "\n".join(PersistenceService.dump_lines(store)) + "\n"
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except OSError as e:
            raise PersistenceError(f"Could not open file for saving: {path} ({e.strerror or e})") from e

        logger.info("Saved to %s: %s", path, store.summary())
        return path

    @staticmethod
    def load(store: Store, path: Optional[str] = None) -> bool:
        """
        Replace the store contents with the file at `path`.
        Returns False (and keeps the current state) when the file cannot be opened.
        """
        path = str(path or store.path)
        try:
            with open(path, "rb") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            logger.info("No data file at %s; starting empty.", path)
            return False
        except OSError as e:
            logger.warning("Could not open %s (%s); keeping current data.", path, e)
            return False

        store.reset()
        it = iter(lines)

        def add_vehicle(line):
            VehicleService.add_vehicle(store, decode_vehicle(line))

        def add_customer(line):
            CustomerService.add_customer(store, decode_customer(line))

        def add_rental(line):
            RentalService.rent_vehicle(store, *decode_rental(line))

        _load_section(it, "vehicle", add_vehicle)
        _load_section(it, "customer", add_customer)
        _load_section(it, "rental", add_rental)
        _load_section(it, "history", store.history.append, skip_blank=False)

        logger.info("Loaded %s: %s", path, store.summary())
        return True


def _read_count(it: Iterator[bytes], section: str) -> int:
    line = next(it, None)
    if line is None:
        return 0
    try:
        return max(int(line.decode("utf-8").strip()), 0)
    except ValueError:
        logger.warning("Bad %s count %r; treating section as empty.", section, line)
        return 0


def _load_section(it: Iterator[bytes], section: str, handle: Callable[[str], None],
                  skip_blank: bool = True) -> None:
    count = _read_count(it, section)
    for _ in range(count):
        line = next(it, None)
        if line is None:
            logger.warning("File ended before all %s records were read.", section)
            return
        if skip_blank and not line.strip():
            continue
        try:
            text = line.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("[Error loading %s]: Line is not valid UTF-8. Line: %r", section, line)
            continue
        try:
            handle(text)
        except InvalidArgumentError as e:
            logger.warning("[Error loading %s]: %s Line: %s", section, e.message, text)
