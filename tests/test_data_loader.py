"""
Tests for DataLoader: record parsing, catalog files, distinct filter values.
Run: pytest tests/test_data_loader.py
"""

import json

import pytest

from conftest import ROOT, make_movie
from filmshelf.data_loader import DataLoader
from filmshelf.models import Movie


def test_parse_movie_converts_types():
	loader = DataLoader()
	movie = loader.parse_movie({
		'id': '7', 'title': ' Heat ', 'director': 'Michael Mann',
		'poster': 'https://example.com/heat.jpg', 'year': '1995', 'rating': 8,
	})
	assert movie == Movie(id=7, title='Heat', director='Michael Mann', poster='https://example.com/heat.jpg', year=1995, rating=8.0)


def test_parse_movie_rejects_missing_fields():
	with pytest.raises(ValueError):
		DataLoader().parse_movie({'id': 1, 'title': 'No director', 'year': 2000, 'rating': 7})


def test_parse_movies_skips_invalid_records():
	records = [
		{'id': 1, 'title': 'Ok', 'director': 'A', 'year': 2000, 'rating': 7},
		'not a record',
		{'id': 'x', 'title': 'Bad id', 'director': 'B', 'year': 2000, 'rating': 7},
		{'id': 2, 'title': 'Also ok', 'director': 'B', 'year': 2001, 'rating': 6.5},
	]
	movies = DataLoader().parse_movies(records)
	assert [m.id for m in movies] == [1, 2]


def test_load_sample_catalog():
	"""The bundled catalog loads completely."""
	movies = DataLoader().load_movies_from_json(str(ROOT / 'data' / 'movies.json'))
	print(f"\nLoaded {len(movies)} movies; first: {movies[0].title} ({movies[0].year})")
	assert len(movies) == 12
	assert movies[0].title == 'Inception'
	assert len({m.id for m in movies}) == len(movies)


def test_load_plain_list_catalog(tmp_path):
	path = tmp_path / 'catalog.json'
	path.write_text(json.dumps([{'id': 3, 'title': 'T', 'director': 'D', 'year': 1980, 'rating': 5}]))
	movies = DataLoader().load_movies_from_json(str(path))
	assert [m.id for m in movies] == [3]


def test_load_missing_catalog(tmp_path):
	with pytest.raises(FileNotFoundError):
		DataLoader().load_movies_from_json(str(tmp_path / 'missing.json'))


def test_distinct_years_and_directors():
	loader = DataLoader()
	movies = [
		make_movie(1, year=2010, director='Nolan'),
		make_movie(2, year=1994, director='Fincher'),
		make_movie(3, year=2010, director='Nolan'),
	]
	assert loader.get_all_years(movies) == ['1994', '2010']
	assert loader.get_all_directors(movies) == ['Fincher', 'Nolan']


def test_parse_movies_rejects_non_integer_ids():
	def record(movie_id):
		return {'id': movie_id, 'title': 'T', 'director': 'D', 'year': 2000, 'rating': 7}

	records = [record(1.9), record(True), record('1.5'), record(' 7 '), record(3)]
	movies = DataLoader().parse_movies(records)
	assert [m.id for m in movies] == [7, 3]


@pytest.mark.parametrize('raw', [1.0, False, '', '-2', 'abc', [1]])
def test_parse_id_rejects(raw):
	with pytest.raises(ValueError):
		DataLoader.parse_id(raw)
