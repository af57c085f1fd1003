"""Tests for the Creational pattern demos."""

import pytest

from pattern_catalog.patterns.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)
from pattern_catalog.patterns.creational.abstract_factory import ProjectFamily, team_output


class TestAbstractFactory:
    """Test that each family produces a consistent team."""

    def test_bank_family_outputs_reference_banking(self):
        lines = team_output(ProjectFamily.BANK)

        assert len(lines) == 3
        assert all("banking" in line.lower() for line in lines)
        assert not any("website" in line.lower() for line in lines)

    def test_website_family_outputs_reference_website(self):
        lines = team_output(ProjectFamily.WEBSITE)

        assert len(lines) == 3
        assert all("website" in line.lower() for line in lines)
        assert not any("banking" in line.lower() for line in lines)

    @pytest.mark.parametrize("family", list(ProjectFamily))
    def test_factory_is_selected_by_key(self, family):
        factory = family.factory()
        expected = {
            ProjectFamily.BANK: abstract_factory.BankingTeamFactory,
            ProjectFamily.WEBSITE: abstract_factory.WebsiteTeamFactory,
        }[family]

        assert isinstance(factory, expected)

    def test_demo_output(self):
        lines = abstract_factory.run()

        assert lines[0] == "Creating project Bank business online"
        assert lines[4] == "Creating project Auction site"
        assert len(lines) == 8


class TestBuilder:
    """Test the director-driven construction."""

    def test_director_builds_complete_website(self):
        website = builder.Director(builder.EnterpriseWebsiteBuilder()).build_website()

        assert website.is_complete
        assert website.cms is builder.Cms.ALFRESCO
        assert website.price == 10000

    def test_incomplete_website_has_no_description(self):
        assert builder.Website(name="Draft").describe() is None

    def test_demo_output(self):
        assert builder.run() == [
            "Name Visit Card, cms wordpress, price 500",
            "Name Enterprise website, cms alfresco, price 10000",
        ]


def test_factory_method_selects_by_language():
    developer = factory_method.Language.OBJC.factory().new_developer()

    assert isinstance(developer, factory_method.ObjCDeveloper)
    assert factory_method.run() == [
        "Swift developer writes Swift code...",
        "ObjC developer writes Objective C code...",
    ]


def test_prototype_clone_is_independent():
    master = prototype.Project(id=1, name="Playground.swift", source="let x = 1")
    clone = prototype.ProjectFactory(master).clone_project()

    clone.name = "Changed"

    assert clone is not master
    assert master.name == "Playground.swift"
    assert clone.source == master.source
    assert prototype.run()[-1] == "Clone is a separate object: True"


def test_singleton_instance_is_shared():
    game = singleton.Game(session_id=7)
    first = singleton.Player("A", game)
    second = singleton.Player("B", game)

    assert first.game is second.game
    assert game.players == ["A", "B"]


def test_singleton_demo_is_repeatable():
    assert singleton.run() == singleton.run()
    assert "Players share one game: True" in singleton.run()
