"""JSON output formatter."""

import json

from jsonpolish.errors import CircularStructureError, FormatError, NestingError


CONTAINERS = (dict, list, tuple)


def _entries(value):
    if isinstance(value, dict):
        return iter([(key, value[key]) for key in sorted(value)])
    return iter([(None, item) for item in value])


def _attach(target, key, value):
    if isinstance(target, dict):
        target[key] = value
    else:
        target.append(value)


def sort_object_keys(data):
    """Return a copy of data with every object's keys in ascending order.

    Arrays keep their element order. A container that contains one of its own
    ancestors raises CircularStructureError; the same container reached twice
    along different paths is fine. Works with an explicit stack, so nesting
    depth is not bounded by the interpreter's recursion limit.

    Args:
        data: Decoded JSON value

    Returns:
        New value tree; data itself is not modified
    """
    if not isinstance(data, CONTAINERS):
        return data

    result = {} if isinstance(data, dict) else []
    # ids of the containers on the current path from the root
    active = {id(data)}
    stack = [(data, _entries(data), result)]

    while stack:
        source, entries, target = stack[-1]
        for key, value in entries:
            if not isinstance(value, CONTAINERS):
                _attach(target, key, value)
                continue

            if id(value) in active:
                raise CircularStructureError()
            copy = {} if isinstance(value, dict) else []
            _attach(target, key, copy)
            active.add(id(value))
            stack.append((value, _entries(value), copy))
            break
        else:
            stack.pop()
            active.discard(id(source))

    return result


def format_json(data, indent=2, sort_keys=False):
    """Format data as JSON text terminated by a newline.

    Args:
        data: Data to format (must be JSON-serializable)
        indent: Spaces per nesting level; 0 means no added whitespace
        sort_keys: If True, sort object keys recursively first

    Returns:
        JSON string

    Raises:
        CircularStructureError: Cycle found while sorting keys
        NestingError: Too deeply nested for the encoder
        FormatError: Value has no JSON representation
    """
    if sort_keys:
        data = sort_object_keys(data)

    if indent:
        kwargs = {'indent': indent, 'separators': (',', ': ')}
    else:
        kwargs = {'separators': (',', ':')}

    try:
        text = json.dumps(data, ensure_ascii=False, allow_nan=False, **kwargs)
    except RecursionError as e:
        raise NestingError() from e
    except (TypeError, ValueError) as e:
        raise FormatError(str(e)) from e
    return text + '\n'
