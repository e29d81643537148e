"""Search and pagination shared by the list endpoints."""
from flask import current_app, request
from sqlalchemy import or_


def page_args():
    """`page` and `limit` from the query string, clamped to sane bounds."""
    # Missing or non-numeric values fall back to the defaults
    page = request.args.get('page', 1, type=int)
    limit = request.args.get('limit', current_app.config['DEFAULT_PAGE_SIZE'], type=int)
    page = max(page, 1)
    limit = max(1, min(limit, current_app.config['MAX_PAGE_SIZE']))
    return page, limit


def apply_search(query, model, search, fields=None):
    """Case-insensitive substring match OR-ed across `fields`."""
    search = (search or '').strip()
    if not search:
        return query
    pattern = f'%{search}%'
    columns = [getattr(model, name) for name in (fields or model.SEARCH_FIELDS)]
    return query.filter(or_(*[column.ilike(pattern) for column in columns]))


def paginated_response(query, serializer=None):
    """Run `query` for the requested page and build the list envelope."""
    page, limit = page_args()
    pagination = query.paginate(page=page, per_page=limit, error_out=False, count=True)
    serializer = serializer or (lambda item: item.to_dict())
    return {
        'success': True,
        'data': [serializer(item) for item in pagination.items],
        'pagination': {
            'total': pagination.total,
            'totalPages': pagination.pages,
            'currentPage': page,
            'limit': limit,
        },
    }
