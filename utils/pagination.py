from typing import Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Query, aliased

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def clamp_limit(limit: Optional[int]) -> int:
    if not limit or limit < 1:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def paginate(query: Query, model, limit: Optional[int] = None, start_after_id: Optional[int] = None):
    """Ordena por `created_at` descendente y aplica el cursor `start_after_id`.

    Si el cursor no existe se ignora (se devuelve la primera página).
    """
    query = query.order_by(model.created_at.desc(), model.id.desc())

    if start_after_id is not None:
        exists = query.session.query(model.id).filter(model.id == start_after_id).first()
        if exists is not None:
            # se compara contra el valor guardado, no contra un datetime de Python
            cursor = aliased(model)
            cursor_created_at = select(cursor.created_at).where(cursor.id == start_after_id).scalar_subquery()
            query = query.filter(
                or_(
                    model.created_at < cursor_created_at,
                    and_(model.created_at == cursor_created_at, model.id < start_after_id),
                )
            )

    return query.limit(clamp_limit(limit)).all()


def paginate_list(items: list, limit: Optional[int] = None, start_after_id: Optional[int] = None) -> list:
    """Igual que `paginate` pero sobre una lista ya ordenada y filtrada en Python."""
    if start_after_id is not None:
        ids = [item.id for item in items]
        if start_after_id in ids:
            items = items[ids.index(start_after_id) + 1:]
    return items[:clamp_limit(limit)]
