"""Tests for flight record parsing."""

import json

import pytest
from flight_reveal import DatasetError
from flight_reveal.dataset import load_flights, parse_flights


def test_parse_valid():
    records = parse_flights([[[51.47, -0.45], [40.64, -73.78]], [[1, 2], [3, 4]]])
    assert records == [((51.47, -0.45), (40.64, -73.78)), ((1.0, 2.0), (3.0, 4.0))]


@pytest.mark.parametrize(
    "data",
    [
        {"from": [1, 2]},
        [[[1, 2]]],
        [[[1, 2], [3]]],
        [[[1, "x"], [3, 4]]],
        [[None, [3, 4]]],
    ],
)
def test_parse_malformed(data):
    with pytest.raises(DatasetError):
        parse_flights(data)


def test_empty_dataset():
    assert parse_flights([]) == []


def test_load_flights(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps([[[35.55, 139.78], [37.62, -122.38]]]))
    assert load_flights(path) == [((35.55, 139.78), (37.62, -122.38))]


def test_load_invalid_json(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text("[[")
    with pytest.raises(DatasetError):
        load_flights(path)
