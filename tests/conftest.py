"""
Shared fixtures: a small movie collection and fake HTTP transport for the client.
"""

import sys
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from filmshelf.config import get_settings
from filmshelf.models import Movie


def make_movie(movie_id, year=2000, director='A', rating=8.0, title=None):
	return Movie(
		id=movie_id,
		title=title or f"Movie {movie_id}",
		director=director,
		poster='',
		year=year,
		rating=rating,
	)


class FakeResponse:
	def __init__(self, payload=None, status_code=200, text=None):
		self.payload = payload
		self.status_code = status_code
		self.text = text

	def raise_for_status(self):
		if self.status_code >= 400:
			raise requests.HTTPError(f"{self.status_code} Error")

	def json(self):
		if self.text is not None:
			raise ValueError("Expecting value")
		return self.payload


class FakeSession:
	"""Answers GETs from a url -> FakeResponse (or exception) table and records the calls."""

	def __init__(self, routes):
		self.routes = routes
		self.calls = []

	def get(self, url, timeout=None):
		self.calls.append((url, timeout))
		answer = self.routes.get(url)
		if answer is None:
			raise requests.ConnectionError(f"No route to {url}")
		if isinstance(answer, Exception):
			raise answer
		return answer


@pytest.fixture
def movies():
	"""Ten movies across three directors, ratings 5.5 .. 9.5, in a deliberately unsorted order."""
	return [
		make_movie(1, year=2010, director='Nolan', rating=8.8),
		make_movie(2, year=1994, director='Tarantino', rating=8.9),
		make_movie(3, year=2008, director='Nolan', rating=9.5),
		make_movie(4, year=2003, director='Wiseau', rating=5.5),
		make_movie(5, year=2012, director='Tarantino', rating=7.4),
		make_movie(6, year=2010, director='Fincher', rating=7.8),
		make_movie(7, year=1999, director='Fincher', rating=8.1),
		make_movie(8, year=2020, director='Nolan', rating=7.0),
		make_movie(9, year=2014, director='Nolan', rating=6.9),
		make_movie(10, year=1994, director='Wiseau', rating=9.0),
	]


@pytest.fixture
def clean_settings():
	"""Drop the cached settings before and after a test that changes FILMSHELF_* variables."""
	get_settings.cache_clear()
	yield
	get_settings.cache_clear()
