from flask import jsonify


def data_or_404(data):
    """Serialize ``data``, or answer an empty 404 when it is ``None``."""
    if data is None:
        return '', 404
    return jsonify(data)
