"""
Phrase Encoder Lambda Function.

Encodes a latitude/longitude pair as a four-word phrase.

    GET  /encode?lat=52.5902&lon=-2.1304
    POST /encode {"lat": 52.5902, "lon": -2.1304}
"""
from typing import Dict, Any, Tuple

from botocore.exceptions import ClientError

from fixphrase.codec import encode
from fixphrase.errors import InputError, WordlistError
from fixphrase.utils import (
    setup_logger,
    create_response,
    get_http_method,
    get_query_params,
    method_not_allowed,
    parse_json_body,
)
from fixphrase.wordlist import get_dictionary

# Initialize logger
logger = setup_logger(__name__)

USAGE = [
    "GET  /encode?lat=52.5902&lon=-2.13049",
    'POST /encode {"lat":52.5902,"lon":-2.13049}',
]


def coordinate_from_json(value: Any, name: str) -> float:
    """
    Read a coordinate from a parsed JSON body.

    Raises:
        ValueError: If the value is not a JSON number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {name} must be a number")
    return float(value)


def read_coordinates(event: Dict[str, Any]) -> Tuple[float, float]:
    """
    Extract lat/lon from a POST body.

    Missing fields default to 0.

    Raises:
        ValueError: If the body is not valid for this endpoint
    """
    body = parse_json_body(event, allowed_fields=('lat', 'lon'))
    lat = coordinate_from_json(body.get('lat', 0), 'lat')
    lon = coordinate_from_json(body.get('lon', 0), 'lon')
    return lat, lon


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for phrase encoding."""
    try:
        logger.info("Phrase encoder Lambda invoked")

        method = get_http_method(event)
        if method == 'GET':
            params = get_query_params(event)
            lat_s = params.get('lat', '')
            lon_s = params.get('lon', '')
            if not lat_s or not lon_s:
                return create_response(400, {
                    'error': 'missing query params: lat and lon are required',
                    'usage': USAGE,
                })
            try:
                lat = float(lat_s)
            except ValueError as e:
                return create_response(400, {'error': 'invalid lat', 'detail': str(e)})
            try:
                lon = float(lon_s)
            except ValueError as e:
                return create_response(400, {'error': 'invalid lon', 'detail': str(e)})

        elif method == 'POST':
            try:
                lat, lon = read_coordinates(event)
            except ValueError as e:
                logger.warning(f"Invalid request body: {e}")
                return create_response(400, {'error': 'invalid json', 'detail': str(e)})

        else:
            return method_not_allowed()

        result = encode(get_dictionary(), lat, lon)

        logger.info(f"Encoded lat={lat} lon={lon} as '{result.phrase}'")
        return create_response(200, result.to_dict())

    except InputError as e:
        logger.warning(f"Validation error: {e}")
        return create_response(400, {'error': str(e), 'field': e.field})
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return create_response(400, {'error': str(e)})
    except (WordlistError, OSError) as e:
        logger.error(f"Wordlist error: {e}")
        return create_response(500, {'error': 'Wordlist unavailable'})
    except ClientError as e:
        logger.error(f"AWS service error: {e}")
        return create_response(500, {'error': 'Failed to load wordlist'})
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return create_response(500, {'error': 'Internal server error'})
