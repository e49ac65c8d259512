"""
Tests for MovieClient against a fake HTTP session.
Run: pytest tests/test_movie_client.py
"""

import pytest
import requests

from conftest import FakeResponse, FakeSession
from filmshelf.movie_client import MovieClient, MovieClientError

BASE = 'http://movies.test/movies'

RECORDS = [
	{'id': 1, 'title': 'Inception', 'director': 'Christopher Nolan', 'poster': 'p1', 'year': 2010, 'rating': 8.8},
	{'id': 2, 'title': 'Pulp Fiction', 'director': 'Quentin Tarantino', 'poster': 'p2', 'year': 1994, 'rating': 8.9},
]


def test_fetch_movies_keeps_service_order():
	session = FakeSession({BASE: FakeResponse(RECORDS)})
	client = MovieClient(BASE + '/', timeout=3, session=session)

	movies = client.fetch_movies()
	assert [m.title for m in movies] == ['Inception', 'Pulp Fiction']
	assert session.calls == [(BASE, 3)]


def test_fetch_movie_by_id():
	session = FakeSession({f"{BASE}/2": FakeResponse(RECORDS[1])})
	movie = MovieClient(BASE, session=session).fetch_movie_by_id(2)
	assert movie.director == 'Quentin Tarantino'
	assert movie.year == 1994


@pytest.mark.parametrize('answer', [
	FakeResponse({'error': 'boom'}, status_code=500),
	FakeResponse(text='<html>'),
	FakeResponse({'movies': RECORDS}),
	requests.Timeout('too slow'),
])
def test_fetch_movies_failures(answer):
	client = MovieClient(BASE, session=FakeSession({BASE: answer}))
	with pytest.raises(MovieClientError):
		client.fetch_movies()


def test_unreachable_service():
	with pytest.raises(MovieClientError):
		MovieClient(BASE, session=FakeSession({})).fetch_movies()


def test_fetch_unknown_movie():
	session = FakeSession({f"{BASE}/9": FakeResponse({}, status_code=404)})
	with pytest.raises(MovieClientError):
		MovieClient(BASE, session=session).fetch_movie_by_id(9)


def test_fetch_movie_with_bad_record():
	session = FakeSession({f"{BASE}/1": FakeResponse({'id': 1, 'title': 'Half a movie'})})
	with pytest.raises(MovieClientError):
		MovieClient(BASE, session=session).fetch_movie_by_id(1)
