# meowmatch/test_app.py
from meowmatch.seed import SAMPLE_CATS, seed_cats
from meowmatch.api.cats.services import CatService


def test_health_check(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == "healthy"


def test_unknown_route_keeps_http_status(client):
    assert client.get('/api/does-not-exist').status_code == 404


def test_seed_creates_shelter_and_sample_cats(db):
    assert seed_cats(db) == len(SAMPLE_CATS)

    assert len(db.docs('shelters')) == 1
    shelter_id = next(iter(db.docs('shelters')))
    cats = CatService(db=db).list_available()
    assert [c.name for c in cats] == [sample['name'] for sample in SAMPLE_CATS]
    assert all(c.shelter_id == shelter_id for c in cats)


def test_seed_is_idempotent(db):
    seed_cats(db)
    assert seed_cats(db) == 0
    assert len(db.docs('cats')) == len(SAMPLE_CATS)


def test_seed_reuses_existing_shelter(db, shelter):
    seed_cats(db)
    assert list(db.docs('shelters')) == [shelter]
    assert {doc['shelter_id'] for doc in db.docs('cats').values()} == {shelter}


def test_seed_cli_command(app, db):
    result = app.test_cli_runner().invoke(args=['seed-cats'])
    assert f"Seeded {len(SAMPLE_CATS)} cats." in result.output
