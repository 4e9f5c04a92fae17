"""
AWS Lambda handler for reading forwarded emails.

Thin orchestration layer that delegates to ForwardParser.
Expects already decoded plain text; MIME handling belongs to the caller.
"""

import json
import logging
import os
from typing import Any, Dict

from .domain.forward_parser import ForwardParser
from .services import catalog as catalog_service

# Configure logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Environment variables
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')

JSON_HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*'
}


def _parse_event(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the event and pull out the read() arguments.

    Raises:
        ValueError: If body is missing or a field has the wrong type
    """
    body = event.get('body')
    subject = event.get('subject')

    if body is None:
        raise ValueError("body is required")
    if not isinstance(body, str):
        raise ValueError("body must be a string")
    if subject is not None and not isinstance(subject, str):
        raise ValueError("subject must be a string")

    return {'body': body, 'subject': subject}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler to read a forwarded email.

    Expected event format:
    {
        "body": "Plain-text email body",
        "subject": "Fwd: Original subject"   (optional)
    }
    """
    logger.info(f"Environment: {ENVIRONMENT}")

    try:
        arguments = _parse_event(event)
        logger.info(
            f"Reading email: body={len(arguments['body'])} characters, "
            f"subject={arguments['subject']!r}"
        )

        parser = ForwardParser(catalog_service.load_catalog())
        result = parser.read(arguments['body'], arguments['subject'])

        logger.info(f"Read complete: {result!r}")

        return {
            'statusCode': 200,
            'headers': JSON_HEADERS,
            'body': json.dumps(result.to_dict())
        }

    except ValueError as ve:
        logger.error(f"Validation error: {str(ve)}")
        return {
            'statusCode': 400,
            'headers': JSON_HEADERS,
            'body': json.dumps({
                'error': str(ve)
            })
        }

    except Exception as e:
        logger.error(f"Error reading email: {str(e)}", exc_info=True)
        return {
            'statusCode': 500,
            'headers': JSON_HEADERS,
            'body': json.dumps({
                'error': 'Internal server error',
                'message': str(e)
            })
        }


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return {
        'statusCode': 200,
        'body': json.dumps({
            'status': 'healthy',
            'environment': ENVIRONMENT,
            'catalogCategories': len(catalog_service.load_catalog())
        })
    }
