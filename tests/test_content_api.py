"""
Tests for the world-scoped content endpoints.

Every category goes through the same gate: owners see and change
everything, guests and anonymous viewers only read rows flagged public.
"""

import pytest
from sqlalchemy.exc import OperationalError

from atlas.models.location import Location
from atlas.models.monster import Monster
from atlas.models.rule import RuleEntry
from atlas.database_seeder import BASELINE_RULES
from atlas.services.location_service import LocationService

CATEGORY_SAMPLES = {
    "locations": {"name": "Waterdeep", "x": 120.5, "y": 340.0},
    "lore": {"title": "Time of Troubles", "era": "Post-Spellplague", "year": 1358},
    "rules": {"name": "Flanking", "category": "Combat", "description": "Advantage when flanking"},
    "monsters": {"name": "Crypt Lurker", "type": "Undead", "challenge_rating": "3"},
    "notes": {"title": "The innkeeper lies", "content": "He is a doppelganger", "category": "Secret"},
}


@pytest.fixture
def public_world(make_world):
    return make_world("Forgotten Realms", is_public=True)


class TestCategoryGate:
    @pytest.mark.parametrize("category", sorted(CATEGORY_SAMPLES))
    def test_owner_sees_private_rows(self, client, public_world, add_row, owner_headers, category):
        row = add_row(public_world["id"], category, **CATEGORY_SAMPLES[category])
        listing = client.get(f"/api/v1/worlds/{public_world['id']}/{category}/", headers=owner_headers)
        assert row["id"] in [r["id"] for r in listing.json()]

    @pytest.mark.parametrize("category", sorted(CATEGORY_SAMPLES))
    def test_guest_sees_only_public_rows(self, client, public_world, add_row, guest_headers, category):
        hidden = add_row(public_world["id"], category, **CATEGORY_SAMPLES[category])
        shown = add_row(public_world["id"], category, **{**CATEGORY_SAMPLES[category], "is_public": True})

        for headers in (guest_headers, {}):
            listing = client.get(f"/api/v1/worlds/{public_world['id']}/{category}/", headers=headers)
            ids = [r["id"] for r in listing.json()]
            assert shown["id"] in ids
            assert hidden["id"] not in ids

    @pytest.mark.parametrize("category", sorted(CATEGORY_SAMPLES))
    def test_hidden_row_is_not_found(self, client, public_world, add_row, guest_headers, category):
        hidden = add_row(public_world["id"], category, **CATEGORY_SAMPLES[category])
        response = client.get(
            f"/api/v1/worlds/{public_world['id']}/{category}/{hidden['id']}", headers=guest_headers
        )
        assert response.status_code == 404

    @pytest.mark.parametrize("category", sorted(CATEGORY_SAMPLES))
    def test_guest_cannot_write(self, client, public_world, add_row, guest_headers, category):
        row = add_row(public_world["id"], category, **{**CATEGORY_SAMPLES[category], "is_public": True})
        base = f"/api/v1/worlds/{public_world['id']}/{category}/"

        assert client.post(base, json=CATEGORY_SAMPLES[category], headers=guest_headers).status_code == 403
        assert client.put(base + row["id"], json={"is_public": False}, headers=guest_headers).status_code == 403
        assert client.delete(base + row["id"], headers=guest_headers).status_code == 403
        assert client.delete(base + row["id"]).status_code == 403

    @pytest.mark.parametrize("category", sorted(CATEGORY_SAMPLES))
    def test_private_world_content_is_not_found(self, client, make_world, add_row, guest_headers, category):
        world = make_world("Greyhawk")
        add_row(world["id"], category, **{**CATEGORY_SAMPLES[category], "is_public": True})
        response = client.get(f"/api/v1/worlds/{world['id']}/{category}/", headers=guest_headers)
        assert response.status_code == 404

    @pytest.mark.parametrize("category", sorted(CATEGORY_SAMPLES))
    def test_owner_updates_and_deletes(self, client, public_world, add_row, owner_headers, category):
        row = add_row(public_world["id"], category, **CATEGORY_SAMPLES[category])
        base = f"/api/v1/worlds/{public_world['id']}/{category}/"

        updated = client.put(base + row["id"], json={"is_public": True}, headers=owner_headers)
        assert updated.status_code == 200
        assert updated.json()["is_public"] is True

        assert client.delete(base + row["id"], headers=owner_headers).status_code == 204
        assert client.get(base + row["id"], headers=owner_headers).status_code == 404

    def test_rows_do_not_leak_between_worlds(self, client, make_world, add_row, owner_headers):
        first = make_world("Greyhawk")
        second = make_world("Mystara")
        row = add_row(first["id"], "locations", name="Hommlet", x=1, y=2)

        response = client.get(f"/api/v1/worlds/{second['id']}/locations/{row['id']}", headers=owner_headers)
        assert response.status_code == 404
        response = client.put(
            f"/api/v1/worlds/{second['id']}/locations/{row['id']}", json={"name": "Moved"}, headers=owner_headers
        )
        assert response.status_code == 404


class TestLocations:
    def test_create_applies_defaults(self, public_world, add_row):
        row = add_row(public_world["id"], "locations", name="Neverwinter", x=10, y=20)
        assert row["taverns"] == []
        assert row["shops"] == []
        assert row["npcs"] == []
        assert row["size"] == 25
        assert row["is_public"] is False

    def test_create_requires_coordinates(self, client, public_world, owner_headers):
        response = client.post(
            f"/api/v1/worlds/{public_world['id']}/locations/",
            json={"name": "Nowhere"},
            headers=owner_headers
        )
        assert response.status_code == 422

    def test_listing_is_sorted_and_searchable(self, client, public_world, add_row, owner_headers):
        for name in ("waterdeep", "Baldur's Gate", "Neverwinter"):
            add_row(public_world["id"], "locations", name=name, x=0, y=0)
        base = f"/api/v1/worlds/{public_world['id']}/locations/"

        names = [r["name"] for r in client.get(base, headers=owner_headers).json()]
        assert names == ["Baldur's Gate", "Neverwinter", "waterdeep"]

        found = client.get(base, params={"search": "NEVER"}, headers=owner_headers).json()
        assert [r["name"] for r in found] == ["Neverwinter"]

    def test_move_marker(self, client, public_world, add_row, owner_headers):
        row = add_row(public_world["id"], "locations", name="Luskan", x=10, y=20, description="City of Sails")
        response = client.patch(
            f"/api/v1/worlds/{public_world['id']}/locations/{row['id']}/position",
            json={"x": 55.5, "y": 66.0},
            headers=owner_headers
        )
        assert response.status_code == 200
        moved = response.json()
        assert (moved["x"], moved["y"]) == (55.5, 66.0)
        assert moved["description"] == "City of Sails"

    def test_guest_cannot_move_marker(self, client, public_world, add_row, guest_headers):
        row = add_row(public_world["id"], "locations", name="Luskan", x=10, y=20, is_public=True)
        response = client.patch(
            f"/api/v1/worlds/{public_world['id']}/locations/{row['id']}/position",
            json={"x": 0, "y": 0},
            headers=guest_headers
        )
        assert response.status_code == 403

    def test_stored_nulls_are_normalised(self, client, db_session, public_world, owner_headers):
        db_session.add(Location(
            world_id=public_world["id"], name="Old Pin", x=1, y=1,
            taverns=None, shops=None, npcs=None, size=None
        ))
        db_session.commit()

        row = client.get(f"/api/v1/worlds/{public_world['id']}/locations/", headers=owner_headers).json()[0]
        assert row["taverns"] == [] and row["shops"] == [] and row["npcs"] == []
        assert row["size"] == 25


class TestLore:
    def test_chronological_order_and_filters(self, client, public_world, add_row, owner_headers):
        add_row(public_world["id"], "lore", title="Spellplague", era="Post-Spellplague", year=1385, category="Event")
        add_row(public_world["id"], "lore", title="Founding of Netheril", era="Netheril", year=-3859)
        add_row(public_world["id"], "lore", title="Fall of Netheril", era="Netheril", year=-339)
        base = f"/api/v1/worlds/{public_world['id']}/lore/"

        entries = client.get(base, headers=owner_headers).json()
        assert [e["year"] for e in entries] == [-3859, -339, 1385]

        netheril = client.get(base, params={"era": "Netheril"}, headers=owner_headers).json()
        assert len(netheril) == 2

        events = client.get(base, params={"category": "Event"}, headers=owner_headers).json()
        assert [e["title"] for e in events] == ["Spellplague"]

        found = client.get(base, params={"search": "fall"}, headers=owner_headers).json()
        assert [e["title"] for e in found] == ["Fall of Netheril"]

    def test_eras_follow_visibility(self, client, public_world, add_row, guest_headers, owner_headers):
        add_row(public_world["id"], "lore", title="Founding", era="Netheril", year=-3859, is_public=True)
        add_row(public_world["id"], "lore", title="Fall", era="Netheril", year=-339, is_public=True)
        add_row(public_world["id"], "lore", title="Hidden", era="Secret Age", year=100)
        url = f"/api/v1/worlds/{public_world['id']}/lore/eras"

        assert client.get(url, headers=guest_headers).json() == [{"name": "Netheril", "year": -3859, "count": 2}]
        assert [e["name"] for e in client.get(url, headers=owner_headers).json()] == ["Netheril", "Secret Age"]

    def test_default_year(self, public_world, add_row):
        entry = add_row(public_world["id"], "lore", title="Untimed")
        assert entry["year"] == 1490


class TestRules:
    def test_baseline_rules_are_shown_to_everyone(self, client, make_world, owner_headers):
        world = make_world("Forgotten Realms", is_public=True)
        rules = client.get(f"/api/v1/worlds/{world['id']}/rules/").json()
        assert len(rules) == len(BASELINE_RULES)
        assert all(r["is_baseline"] for r in rules)

    def test_world_rules_join_baseline(self, client, public_world, add_row, guest_headers):
        add_row(public_world["id"], "rules", name="Flanking", category="Combat", is_public=True)
        add_row(public_world["id"], "rules", name="Secret Rule", category="Combat")
        rules = client.get(f"/api/v1/worlds/{public_world['id']}/rules/", headers=guest_headers).json()

        names = [r["name"] for r in rules]
        assert "Flanking" in names
        assert "Secret Rule" not in names
        assert len(rules) == len(BASELINE_RULES) + 1
        assert [r["category"] for r in rules] == sorted(r["category"] for r in rules)

    def test_categories(self, client, public_world, add_row, owner_headers):
        add_row(public_world["id"], "rules", name="Flanking", category="Combat")
        categories = client.get(f"/api/v1/worlds/{public_world['id']}/rules/categories", headers=owner_headers)
        assert categories.json() == ["Combat", "Conditions", "Resting"]

    def test_filter_by_category(self, client, public_world, owner_headers):
        rules = client.get(
            f"/api/v1/worlds/{public_world['id']}/rules/", params={"category": "Resting"}, headers=owner_headers
        ).json()
        assert sorted(r["name"] for r in rules) == ["Long Rest", "Short Rest"]

    def test_baseline_rules_cannot_be_changed_through_a_world(self, client, db_session, public_world, owner_headers):
        baseline = db_session.query(RuleEntry).filter(RuleEntry.world_id.is_(None)).first()
        base = f"/api/v1/worlds/{public_world['id']}/rules/{baseline.id}"

        assert client.put(base, json={"name": "Hijacked"}, headers=owner_headers).status_code == 404
        assert client.delete(base, headers=owner_headers).status_code == 404
        db_session.refresh(baseline)
        assert baseline.name != "Hijacked"


class TestMonsters:
    def test_slug_and_defaults(self, public_world, add_row):
        monster = add_row(public_world["id"], "monsters", name="Crypt Lurker")
        assert monster["slug"] == "crypt-lurker"
        assert monster["speed"] == {"walk": 30}
        assert monster["languages"] == "Common"
        assert monster["is_homebrew"] is True

    def test_explicit_slug_is_kept(self, public_world, add_row):
        monster = add_row(public_world["id"], "monsters", name="Crypt Lurker", slug="lurker-v2")
        assert monster["slug"] == "lurker-v2"

    def test_features_round_trip(self, public_world, add_row):
        monster = add_row(
            public_world["id"], "monsters", name="Ghoul King",
            actions=[{"name": "Claw", "desc": "Melee Weapon Attack: +4 to hit"}]
        )
        assert monster["actions"] == [{"name": "Claw", "desc": "Melee Weapon Attack: +4 to hit"}]
        assert monster["legendary_actions"] == []

    def test_ability_scores_are_bounded(self, client, public_world, owner_headers):
        response = client.post(
            f"/api/v1/worlds/{public_world['id']}/monsters/",
            json={"name": "Titan", "strength": 31},
            headers=owner_headers
        )
        assert response.status_code == 422

    def test_type_filter_is_case_insensitive(self, client, public_world, add_row, owner_headers):
        add_row(public_world["id"], "monsters", name="Wight", type="Undead")
        add_row(public_world["id"], "monsters", name="Goblin", type="Humanoid")
        found = client.get(
            f"/api/v1/worlds/{public_world['id']}/monsters/", params={"type": "undead"}, headers=owner_headers
        ).json()
        assert [m["name"] for m in found] == ["Wight"]

    def test_stored_nulls_are_normalised(self, client, db_session, public_world, owner_headers):
        db_session.add(Monster(
            world_id=public_world["id"], slug="old", name="Old Entry",
            speed=None, actions=None, special_abilities=None, legendary_actions=None,
            senses=None, languages=None
        ))
        db_session.commit()

        monster = client.get(f"/api/v1/worlds/{public_world['id']}/monsters/", headers=owner_headers).json()[0]
        assert monster["speed"] == {}
        assert monster["actions"] == []
        assert monster["languages"] == ""


class TestNotes:
    def test_category_is_validated(self, client, public_world, owner_headers):
        response = client.post(
            f"/api/v1/worlds/{public_world['id']}/notes/",
            json={"title": "Odd", "category": "Gossip"},
            headers=owner_headers
        )
        assert response.status_code == 422

    def test_default_category(self, public_world, add_row):
        note = add_row(public_world["id"], "notes", title="Session 1 recap")
        assert note["category"] == "Plot"

    def test_filter_by_category(self, client, public_world, add_row, owner_headers):
        add_row(public_world["id"], "notes", title="Elminster", category="NPC")
        add_row(public_world["id"], "notes", title="Cult rising", category="Plot")
        found = client.get(
            f"/api/v1/worlds/{public_world['id']}/notes/", params={"category": "NPC"}, headers=owner_headers
        ).json()
        assert [n["title"] for n in found] == ["Elminster"]

    def test_revealed_note_is_visible_to_guests(self, client, public_world, add_row, owner_headers, guest_headers):
        note = add_row(public_world["id"], "notes", title="Prophecy", category="Plot")
        base = f"/api/v1/worlds/{public_world['id']}/notes/{note['id']}"

        assert client.get(base, headers=guest_headers).status_code == 404
        client.put(base, json={"is_public": True}, headers=owner_headers)
        assert client.get(base, headers=guest_headers).json()["title"] == "Prophecy"


def test_store_failure_is_reported(client, public_world, owner_headers, monkeypatch):
    def broken_create(self, world_id, data):
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(LocationService, "create_item", broken_create)
    response = client.post(
        f"/api/v1/worlds/{public_world['id']}/locations/",
        json={"name": "Waterdeep", "x": 1, "y": 2},
        headers=owner_headers
    )
    assert response.status_code == 503
    assert "OperationalError" in response.json()["detail"]


class TestLoreEras:
    def test_cleared_era_is_summarised_as_blank(self, client, public_world, add_row, owner_headers):
        entry = add_row(public_world["id"], "lore", title="Drifting Tale", era="Netheril", year=-500)
        base = f"/api/v1/worlds/{public_world['id']}/lore/"

        cleared = client.put(base + entry["id"], json={"era": None}, headers=owner_headers)
        assert cleared.status_code == 200
        assert cleared.json()["era"] == ""

        eras = client.get(base + "eras", headers=owner_headers)
        assert eras.status_code == 200
        assert eras.json() == [{"name": "", "year": -500, "count": 1}]


class TestNoteOrder:
    def test_newest_first_within_the_same_second(self, client, public_world, add_row, owner_headers):
        for title in ("first", "second", "third"):
            add_row(public_world["id"], "notes", title=title, category="Plot")

        notes = client.get(f"/api/v1/worlds/{public_world['id']}/notes/", headers=owner_headers).json()
        assert [n["title"] for n in notes] == ["third", "second", "first"]
