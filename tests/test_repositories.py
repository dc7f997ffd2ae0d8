"""Tests for the data-access layer.

Tests cover:
- Reads by key and full listings, with and without related collections
- Create / bulk create / update / delete
- Attaching films to actors and cascading link deletion, in the ORM and the store
- Keys and years outside the range the store can hold
- Store failures surfacing as StoreError
"""

import pytest
from marshmallow import ValidationError
from sqlalchemy import create_engine, delete, func, select, text
from sqlalchemy.exc import IntegrityError, OperationalError

from filmdb.errors import MissingReferenceError, StoreError
from filmdb.models import Actor, db
from filmdb.models.film_actor import FilmActor


def count_links():
    return db.session.scalar(select(func.count()).select_from(FilmActor))


def fail_commit(*args, **kwargs):
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


# ============================================================================
# Reads
# ============================================================================


def test_list_all_empty_store_returns_empty_list(actors, films):
    assert actors.list_all() == []
    assert films.list_all() == []


def test_list_all_is_ordered_by_key(actors):
    created = actors.bulk_create(
        [
            {"first_name": "Penelope", "last_name": "Guiness"},
            {"first_name": "Nick", "last_name": "Wahlberg"},
        ]
    )

    listed = actors.list_all()

    assert [a.actor_id for a in listed] == sorted(a.actor_id for a in created)


def test_get_by_key_missing_returns_none(actors, films):
    assert actors.get_by_key(999) is None
    assert films.get_by_key(999) is None


def test_get_by_key_with_relations_missing_returns_none(actors):
    assert actors.get_by_key_with_relations(999) is None


def test_with_relations_always_has_collection(actors, films, leo, inception):
    assert actors.get_by_key_with_relations(leo.actor_id).films == []
    assert films.get_by_key_with_relations(inception.film_id).actors == []
    assert [a.films for a in actors.list_all_with_relations()] == [[]]


# ============================================================================
# Create / update / delete
# ============================================================================


def test_create_assigns_new_keys(actors):
    first = actors.create({"first_name": "Leo", "last_name": "Di Caprio"})
    second = actors.create({"first_name": "Kate", "last_name": "Winslet"})

    assert first.actor_id is not None
    assert second.actor_id != first.actor_id
    assert actors.get_by_key(second.actor_id).first_name == "Kate"


def test_create_film_optional_fields(films):
    film = films.create({"title": "Memento"})

    assert film.description is None
    assert film.release_year is None


def test_create_missing_required_field_raises(actors, films):
    with pytest.raises(ValidationError) as excinfo:
        actors.create({"first_name": "Leo"})
    assert "last_name" in excinfo.value.messages

    with pytest.raises(ValidationError):
        films.create({"description": "sin título"})

    assert actors.list_all() == []


def test_create_rejects_client_supplied_key(actors):
    with pytest.raises(ValidationError):
        actors.create({"actor_id": 7, "first_name": "Leo", "last_name": "Di Caprio"})


def test_bulk_create_returns_distinct_new_keys(actors):
    created = actors.bulk_create(
        [
            {"first_name": "Penelope", "last_name": "Guiness"},
            {"first_name": "Nick", "last_name": "Wahlberg"},
            {"first_name": "Ed", "last_name": "Chase"},
        ]
    )

    assert len(created) == 3
    assert len({a.actor_id for a in created}) == 3
    assert len(actors.list_all()) == 3


def test_bulk_create_invalid_item_creates_nothing(actors):
    with pytest.raises(ValidationError) as excinfo:
        actors.bulk_create(
            [
                {"first_name": "Penelope", "last_name": "Guiness"},
                {"first_name": "Nick"},
            ]
        )

    assert 1 in excinfo.value.messages
    assert actors.list_all() == []


def test_bulk_create_store_failure_rolls_back_batch(actors, monkeypatch):
    monkeypatch.setattr(actors.session, "commit", fail_commit)

    with pytest.raises(StoreError):
        actors.bulk_create(
            [
                {"first_name": "Penelope", "last_name": "Guiness"},
                {"first_name": "Nick", "last_name": "Wahlberg"},
            ]
        )

    monkeypatch.undo()
    assert actors.list_all() == []


def test_update_replaces_fields(films, inception):
    updated = films.update(inception.film_id, {"title": "Origen", "release_year": 2011})

    assert updated.title == "Origen"
    assert updated.release_year == 2011
    # full replace: omitted optional field is cleared
    assert updated.description is None


def test_update_missing_key_returns_none_and_creates_nothing(actors):
    assert actors.update(42, {"first_name": "Leo", "last_name": "Di Caprio"}) is None
    assert actors.list_all() == []


def test_update_invalid_payload_keeps_record(actors, leo):
    with pytest.raises(ValidationError):
        actors.update(leo.actor_id, {"first_name": "Leonardo"})

    assert actors.get_by_key(leo.actor_id).first_name == "Leo"


def test_delete(actors, leo):
    actor_id = leo.actor_id

    assert actors.delete(actor_id) is True
    assert actors.get_by_key(actor_id) is None
    assert actors.delete(actor_id) is False


# ============================================================================
# Association
# ============================================================================


def test_attach_is_navigable_both_ways(actors, films, leo, inception):
    actors.attach(leo.actor_id, inception.film_id)

    actor = actors.get_by_key_with_relations(leo.actor_id)
    film = films.get_by_key_with_relations(inception.film_id)

    assert [f.title for f in actor.films] == ["Inception"]
    assert [a.first_name for a in film.actors] == ["Leo"]
    assert count_links() == 1


def test_attach_twice_keeps_single_link(actors, leo, inception):
    actors.attach(leo.actor_id, inception.film_id)
    actor = actors.attach(leo.actor_id, inception.film_id)

    assert len(actor.films) == 1
    assert count_links() == 1


def test_attach_missing_actor_or_film(actors, leo, inception):
    with pytest.raises(MissingReferenceError) as excinfo:
        actors.attach(999, inception.film_id)
    assert excinfo.value.entity == "Actor"

    with pytest.raises(MissingReferenceError) as excinfo:
        actors.attach(leo.actor_id, 999)
    assert excinfo.value.entity == "Film"

    assert count_links() == 0


def test_list_all_with_relations_mixed(actors, films, leo, inception):
    kate = actors.create({"first_name": "Kate", "last_name": "Winslet"})
    actors.attach(leo.actor_id, inception.film_id)

    listed = {a.first_name: a.films for a in actors.list_all_with_relations()}

    assert [f.film_id for f in listed["Leo"]] == [inception.film_id]
    assert listed["Kate"] == []
    assert kate.actor_id is not None


@pytest.mark.parametrize("delete_actor", [True, False])
def test_delete_cascades_links(actors, films, leo, inception, delete_actor):
    actors.attach(leo.actor_id, inception.film_id)

    if delete_actor:
        assert actors.delete(leo.actor_id)
        assert films.get_by_key_with_relations(inception.film_id).actors == []
    else:
        assert films.delete(inception.film_id)
        assert actors.get_by_key_with_relations(leo.actor_id).films == []

    assert count_links() == 0


def test_store_cascades_links_without_orm(actors, leo, inception):
    actors.attach(leo.actor_id, inception.film_id)

    db.session.execute(delete(Actor).where(Actor.actor_id == leo.actor_id))
    db.session.commit()

    assert count_links() == 0


def test_store_rejects_link_to_missing_actor(inception):
    db.session.add(FilmActor(actor_id=999, film_id=inception.film_id))

    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()

    assert count_links() == 0


def test_foreign_keys_enabled_on_app_engine_only(app):
    assert db.session.execute(text("PRAGMA foreign_keys")).scalar() == 1

    other = create_engine("sqlite://")
    with other.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 0
    other.dispose()


# ============================================================================
# Keys and values beyond the store range
# ============================================================================


def test_key_beyond_store_range_is_missing(actors, films, leo, inception):
    key = 10**20

    assert actors.get_by_key(key) is None
    assert films.get_by_key_with_relations(key) is None
    assert actors.update(key, {"first_name": "Leo", "last_name": "Di Caprio"}) is None
    assert films.delete(key) is False

    with pytest.raises(MissingReferenceError) as excinfo:
        actors.attach(leo.actor_id, key)
    assert excinfo.value.key == key

    with pytest.raises(MissingReferenceError):
        actors.attach(-key, inception.film_id)


@pytest.mark.parametrize("release_year", ["2010", 10**30, -5])
def test_release_year_must_be_bounded_integer(films, release_year):
    with pytest.raises(ValidationError) as excinfo:
        films.create({"title": "Inception", "release_year": release_year})

    assert "release_year" in excinfo.value.messages
    assert films.list_all() == []


# ============================================================================
# Store failures
# ============================================================================


def test_create_store_failure_raises_store_error(actors, monkeypatch):
    monkeypatch.setattr(actors.session, "commit", fail_commit)

    with pytest.raises(StoreError) as excinfo:
        actors.create({"first_name": "Leo", "last_name": "Di Caprio"})

    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_read_store_failure_raises_store_error(films, monkeypatch):
    def fail_scalars(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("no such table: film"))

    monkeypatch.setattr(films.session, "scalars", fail_scalars)

    with pytest.raises(StoreError):
        films.list_all()
