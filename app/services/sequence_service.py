from typing import Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.counter import Counter


def next_sequence_value(
    db: Session,
    name: str,
    *,
    seed: Optional[Callable[[Session], int]] = None,
) -> int:
    """Advance the named counter and return its new value.

    The increment is a single ``UPDATE ... SET value = value + 1`` in the
    caller's transaction, so concurrent writers serialize on the counter row
    and never observe the same value. A missing counter is created from
    ``seed(db)`` (default 0).
    """
    bump = update(Counter).where(Counter.name == name).values(value=Counter.value + 1)
    result = db.execute(bump)
    if result.rowcount == 0:
        start = seed(db) if seed is not None else 0
        try:
            with db.begin_nested():
                db.add(Counter(name=name, value=start + 1))
        except IntegrityError:
            # Created concurrently; take the next value from the winner's row.
            db.execute(bump)

    return db.execute(select(Counter.value).where(Counter.name == name)).scalar_one()


__all__ = ["next_sequence_value"]
