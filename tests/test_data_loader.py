"""
Unit tests for DataLoader: parsing the JSON catalog and the degrade-to-empty policy.
Run: pytest tests/test_data_loader.py
"""

import json
from pathlib import Path

from movie_catalog.data_loader import DataLoader
from movie_catalog.models import Movie

ROOT = Path(__file__).resolve().parents[1]
DATA_PATH = ROOT / 'data' / 'movies.json'


def make_record(**overrides):
	record = {
		'id': 1,
		'movieName': 'Test Movie',
		'director': 'Test Director',
		'year': 2023,
		'genre': 'Drama',
		'description': 'Test description',
		'duration': 120,
		'imdbRating': 4.5,
	}
	record.update(overrides)
	return record


def write_json(tmp_path, payload) -> str:
	path = tmp_path / 'movies.json'
	path.write_text(json.dumps(payload), encoding='utf-8')
	return str(path)


def test_loads_fixture_in_source_order():
	movies = DataLoader().load_movies_from_json(str(DATA_PATH))
	raw = json.loads(DATA_PATH.read_text(encoding='utf-8'))

	assert len(movies) == len(raw) == 12
	assert [m.id for m in movies] == [r['id'] for r in raw]
	assert movies[0] == Movie(
		id=1,
		movie_name='The Prison Escape',
		director='John Director',
		year=1994,
		genre='Drama',
		description=raw[0]['description'],
		duration=142,
		imdb_rating=5.0,
	)


def test_integer_rating_is_widened_to_float(tmp_path):
	movies = DataLoader().load_movies_from_json(write_json(tmp_path, [make_record(imdbRating=4)]))
	assert movies[0].imdb_rating == 4.0
	assert isinstance(movies[0].imdb_rating, float)


def test_parse_records_accepts_decoded_source():
	movies = DataLoader().parse_records([make_record(id=7), make_record(id=3, movieName='Other')])
	assert [m.id for m in movies] == [7, 3]


def test_missing_file_degrades_to_empty(tmp_path):
	assert DataLoader().load_movies_from_json(str(tmp_path / 'nope.json')) == []


def test_invalid_json_degrades_to_empty(tmp_path):
	path = tmp_path / 'movies.json'
	path.write_text('[{"id": 1,', encoding='utf-8')
	assert DataLoader().load_movies_from_json(str(path)) == []


def test_oversized_int_literal_degrades_to_empty(tmp_path):
	path = tmp_path / 'movies.json'
	path.write_text('[{"id": ' + '9' * 5000 + '}]', encoding='utf-8')
	assert DataLoader().load_movies_from_json(str(path)) == []


def test_deeply_nested_json_degrades_to_empty(tmp_path):
	path = tmp_path / 'movies.json'
	path.write_text('[' * 100000 + ']' * 100000, encoding='utf-8')
	assert DataLoader().load_movies_from_json(str(path)) == []


def test_top_level_must_be_an_array(tmp_path):
	assert DataLoader().load_movies_from_json(write_json(tmp_path, {'movies': []})) == []
	assert DataLoader().parse_records(None) == []


def test_missing_field_rejects_whole_source(tmp_path):
	broken = make_record(id=2)
	del broken['director']
	payload = [make_record(id=1), broken]
	assert DataLoader().load_movies_from_json(write_json(tmp_path, payload)) == []


def test_wrong_field_types_degrade_to_empty():
	loader = DataLoader()
	assert loader.parse_records([make_record(id='1')]) == []
	assert loader.parse_records([make_record(year='1994')]) == []
	assert loader.parse_records([make_record(genre=None)]) == []
	assert loader.parse_records([make_record(imdbRating='4.5')]) == []
	assert loader.parse_records([make_record(duration=True)]) == []
	assert loader.parse_records(['not an object']) == []


def test_non_positive_id_and_blank_name_are_rejected():
	loader = DataLoader()
	assert loader.parse_records([make_record(id=0)]) == []
	assert loader.parse_records([make_record(id=-4)]) == []
	assert loader.parse_records([make_record(movieName='   ')]) == []


def test_duplicate_ids_reject_whole_source():
	payload = [make_record(id=1), make_record(id=2, movieName='B'), make_record(id=1, movieName='C')]
	assert DataLoader().parse_records(payload) == []


def test_empty_array_is_an_empty_catalog(tmp_path):
	assert DataLoader().load_movies_from_json(write_json(tmp_path, [])) == []


def test_year_range_helper():
	loader = DataLoader()
	movies = loader.load_movies_from_json(str(DATA_PATH))
	assert loader.get_year_range(movies) == (1972, 2010)
	assert loader.get_year_range([]) == (0, 0)
