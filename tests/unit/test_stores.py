"""
Tests for the furniture stores
"""

import inspect

import pytest

from furniture_store.factories import IFurnitureFactory, OtobiFactory
from furniture_store.stores import (
    FurnitureStore,
    HatilFurnitureStore,
    OtobiFurnitureStore,
    ConfiguredFurnitureStore,
)
from furniture_store.stores import base
from furniture_store.products import IChair, ITable


HATIL_ORDER = ["Hatil chair delivered", "Hatil table delivered"]
OTOBI_ORDER = ["Otobi chair delivered", "Otobi table delivered"]


class RecordingFactory(IFurnitureFactory):
    """Factory stand-in that records calls and hands out Otobi furniture"""

    variant = OtobiFactory.variant

    def __init__(self):
        self.calls = []

    def create_chair(self) -> IChair:
        self.calls.append("chair")
        return OtobiFactory().create_chair()

    def create_table(self) -> ITable:
        self.calls.append("table")
        return OtobiFactory().create_table()


@pytest.mark.unit
class TestFurnitureStore:
    def test_hatil_store_order(self, capsys):
        HatilFurnitureStore().order_furniture()

        assert capsys.readouterr().out.splitlines() == HATIL_ORDER

    def test_otobi_store_order(self, capsys):
        OtobiFurnitureStore().order_furniture()

        assert capsys.readouterr().out.splitlines() == OTOBI_ORDER

    def test_stores_in_sequence(self, capsys):
        """Running both stores keeps each family's deliveries grouped and ordered"""
        for store in (HatilFurnitureStore(), OtobiFurnitureStore()):
            store.order_furniture()

        assert capsys.readouterr().out.splitlines() == HATIL_ORDER + OTOBI_ORDER

    def test_order_workflow_is_shared(self):
        """Stores only override factory selection"""
        for store_class in (HatilFurnitureStore, OtobiFurnitureStore, ConfiguredFurnitureStore):
            assert store_class.order_furniture is FurnitureStore.order_furniture
            assert store_class.select_factory is not FurnitureStore.select_factory

    def test_order_workflow_names_no_concrete_type(self):
        source = inspect.getsource(base)

        for name in ("Hatil", "Otobi"):
            assert name not in source

    def test_swapping_factory_changes_output(self, capsys):
        factory = RecordingFactory()

        class SwappedStore(HatilFurnitureStore):
            def select_factory(self) -> IFurnitureFactory:
                return factory

        SwappedStore().order_furniture()

        assert factory.calls == ["chair", "table"]
        assert capsys.readouterr().out.splitlines() == OTOBI_ORDER

    def test_factory_selected_per_order(self):
        calls = []

        class CountingStore(FurnitureStore):
            def select_factory(self) -> IFurnitureFactory:
                calls.append(1)
                return OtobiFactory()

        store = CountingStore()
        store.order_furniture()
        store.order_furniture()

        assert len(calls) == 2

    def test_base_store_is_abstract(self):
        with pytest.raises(TypeError):
            FurnitureStore()


@pytest.mark.unit
class TestConfiguredFurnitureStore:
    def test_explicit_variant(self, capsys):
        ConfiguredFurnitureStore("hatil").order_furniture()

        assert capsys.readouterr().out.splitlines() == HATIL_ORDER

    def test_variant_from_settings(self, capsys, otobi_settings):
        ConfiguredFurnitureStore(settings=otobi_settings).order_furniture()

        assert capsys.readouterr().out.splitlines() == OTOBI_ORDER

    def test_explicit_variant_wins_over_settings(self, capsys, otobi_settings):
        ConfiguredFurnitureStore("hatil", settings=otobi_settings).order_furniture()

        assert capsys.readouterr().out.splitlines() == HATIL_ORDER

    def test_variant_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("FURNITURE_VARIANT", "Otobi")

        ConfiguredFurnitureStore().order_furniture()

        assert capsys.readouterr().out.splitlines() == OTOBI_ORDER

    def test_unknown_variant_delivers_nothing(self, capsys):
        with pytest.raises(ValueError):
            ConfiguredFurnitureStore("ikea").order_furniture()

        assert capsys.readouterr().out == ""
