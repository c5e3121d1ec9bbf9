import json
import pytest

ELECTION = {
    "month": "1", "num": 500, "link": "", "year": "2009", "news": "",
    "safe_title": "Election", "transcript": "", "alt": "desc text",
    "img": "https://imgs.xkcd.com/comics/election.png", "title": "Election", "day": "2",
}

@pytest.fixture
def election_record():
    return dict(ELECTION)

@pytest.fixture
def election_body():
    return json.dumps(ELECTION)
