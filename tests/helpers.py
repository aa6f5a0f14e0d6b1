"""
Shared fakes for the scanner tests.
"""
import json
from unittest import mock

import requests


def make_response(status_code, json_data=None, headers=None):
    """Build a stand-in for requests.Response."""
    response = mock.Mock()
    response.status_code = status_code
    response.headers = headers or {}
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
        body = b'not json'
    else:
        response.json.return_value = json_data
        body = b'' if json_data is None else json.dumps(json_data).encode()
    response.iter_content.side_effect = lambda chunk_size=1: iter([body])
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f'{status_code} Error', response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


def fixed_rng(*values):
    """Random source returning the given values in order (last one repeats)."""
    values = list(values)
    rng = mock.Mock()

    def _random():
        return values.pop(0) if len(values) > 1 else values[0]

    rng.random.side_effect = _random
    return rng
