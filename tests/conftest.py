# tests/conftest.py
import pytest

from core.config import get_settings
from core.data import clear_dataset_cache


SAMPLE_CSV = """id,name,type,platform,genres,developer,publisher,release_date,release_year,release_month,main_story,main_plus_sides,completionist,all_styles,single_player,co_op,versus
1,Alpha,game,"PC, Switch","RPG, Action",Studio A,Pub A,2010-03-01,2010,3,10,14,20,15,100,,
2,Beta,DLC,PC,Action,Studio A,Pub A,2010-05-01,2010,5,20,30,40,25,0,2,
3,Gamma,expansion,"PS4, PC",Puzzle, Studio B ,Pub B,2012-01-01,2012,1,5,,9,40,12,,3
4,Delta,mod,Switch,,Studio C,Pub C,,,,,,,,,,
"""


@pytest.fixture(autouse=True)
def _fresh_caches():
    get_settings.cache_clear()
    clear_dataset_cache()
    yield
    get_settings.cache_clear()
    clear_dataset_cache()


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "hltb_dataset.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def use_dataset(monkeypatch):
    """Point HLTB_DATASET_PATH at a file and reset the process caches."""

    def _use(path):
        monkeypatch.setenv("HLTB_DATASET_PATH", str(path))
        get_settings.cache_clear()
        clear_dataset_cache()
        return path

    return _use
