# -*- coding: utf-8 -*-
import json
import os

import pytest

FIXTURES = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'test', 'fixtures')

# Each story directory holds one kind of message head; every JSON file in it
# is one story.
request_story_files = sorted(
    os.path.join(FIXTURES, 'requests', name)
    for name in os.listdir(os.path.join(FIXTURES, 'requests'))
    if name.endswith('.json')
)
response_story_files = sorted(
    os.path.join(FIXTURES, 'responses', name)
    for name in os.listdir(os.path.join(FIXTURES, 'responses'))
    if name.endswith('.json')
)


def _load_story(path):
    with open(path, 'r', encoding='utf-8') as f:
        details = json.loads(f.read())

    # Heads are stored as text; code points up to 0xFF stand for single
    # bytes so that obs-text can be expressed.
    for case in details['cases']:
        case['raw'] = case['raw'].encode('latin-1')

    return details


@pytest.fixture(scope="class",
                params=request_story_files,
                ids=os.path.basename)
def request_story(request):
    """
    Provides a set of request heads and what they should parse to.
    """
    return _load_story(request.param)


@pytest.fixture(scope="class",
                params=response_story_files,
                ids=os.path.basename)
def response_story(request):
    """
    Provides a set of response heads and what they should parse to.
    """
    return _load_story(request.param)
