from functools import wraps
from django.http import JsonResponse


def require_source_key(view_func):
    """
    Decorator for fixture API views that read ``?source_key=``.
    Returns a 400 JSON error when it is missing and passes it to the view otherwise.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        source_key = request.GET.get("source_key")
        if not source_key:
            return JsonResponse({"ok": False, "error": "Missing source_key"}, status=400)
        return view_func(request, source_key, *args, **kwargs)
    return wrapper


def require_get(view_func):
    """Return a 405 JSON error for anything but GET."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if request.method != "GET":
            return JsonResponse({"ok": False, "error": "Method not allowed"}, status=405)
        return view_func(request, *args, **kwargs)
    return wrapper
