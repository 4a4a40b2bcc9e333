"""导入导出与表单解析测试。"""
from __future__ import annotations

import json

import pytest

from services.portfolio import (
    ImportFormatError,
    export_json,
    import_json,
    parse_form,
    resolve_probability,
    slider_seed,
)
from tests.factories import make_account

SAMPLE = [
    {
        "id": "8b1f0c2e-0000-4000-8000-000000000001",
        "name": "Müller GmbH",
        "arr": 120000,
        "loginsPerMonth": 42,
        "sessionDuration": 1.5,
        "notes": "Renewal in Q3",
        "expansionProbability": 70,
        "stakeholderProbability": 55.5,
        "createdAt": 1718000000000,
    },
    {
        "id": "8b1f0c2e-0000-4000-8000-000000000002",
        "name": "Nordwind",
        "arr": 0,
        "loginsPerMonth": 0,
        "sessionDuration": 0,
        "notes": "",
        "expansionProbability": 0,
        "stakeholderProbability": 100,
        "createdAt": 1718000000001,
    },
]


def test_round_trip_preserves_document():
    """export(import(X)) 逐字还原 X（含顺序与数值类型）。"""
    text = json.dumps(SAMPLE, indent=2, ensure_ascii=False)
    accounts = import_json(text)
    assert [a.name for a in accounts] == ["Müller GmbH", "Nordwind"]
    assert export_json(accounts) == text
    assert json.loads(export_json(accounts)) == SAMPLE


def test_export_field_order():
    exported = json.loads(export_json([make_account("a", arr=1)]))
    assert list(exported[0].keys()) == [
        "id", "name", "arr", "loginsPerMonth", "sessionDuration", "notes",
        "expansionProbability", "stakeholderProbability", "createdAt",
    ]


def test_import_empty_array():
    assert import_json("[]") == []


def test_import_ignores_extra_fields():
    doc = [dict(SAMPLE[0], color="red")]
    accounts = import_json(json.dumps(doc))
    assert accounts[0].to_dict() == SAMPLE[0]


@pytest.mark.parametrize("payload", [
    "not json",
    '{"accounts": []}',
    "42",
    '["a string"]',
])
def test_import_rejects_malformed(payload):
    with pytest.raises(ImportFormatError):
        import_json(payload)


def test_import_rejects_missing_field():
    doc = [{k: v for k, v in SAMPLE[0].items() if k != "arr"}]
    with pytest.raises(ImportFormatError, match="arr"):
        import_json(json.dumps(doc))


@pytest.mark.parametrize("field, value", [
    ("expansionProbability", 101),
    ("stakeholderProbability", -1),
    ("arr", -5),
    ("loginsPerMonth", "10"),
    ("sessionDuration", True),
    ("name", 7),
])
def test_import_rejects_bad_values(field, value):
    doc = [dict(SAMPLE[0], **{field: value})]
    with pytest.raises(ImportFormatError):
        import_json(json.dumps(doc))


def test_import_error_is_value_error():
    assert issubclass(ImportFormatError, ValueError)


# ─── 表单解析 ───

def test_parse_form_new_account():
    acc = parse_form("Acme", "1000.5", "12", "0.75", "note", 60, 40)
    assert acc.name == "Acme"
    assert acc.arr == 1000.5
    assert acc.logins_per_month == 12
    assert acc.session_duration == 0.75
    assert acc.expansion_probability == 60
    assert acc.stakeholder_probability == 40
    assert acc.id
    assert acc.created_at > 0


def test_parse_form_edit_keeps_identity():
    original = make_account("keep", "Old", arr=1, created_at=123)
    edited = parse_form("New", "2", "3", "4", editing=original)
    assert edited.id == "keep"
    assert edited.created_at == 123
    assert edited.name == "New"
    assert original.name == "Old"


@pytest.mark.parametrize("args", [
    ("", "1", "1", "1"),
    ("A", "", "1", "1"),
    ("A", "1", "", "1"),
    ("A", "1", "1", " "),
    ("A", "abc", "1", "1"),
    ("A", "1", "1.5", "1"),
    ("A", "-1", "1", "1"),
])
def test_parse_form_rejects(args):
    with pytest.raises(ValueError):
        parse_form(*args)


def test_parse_form_rejects_probability_out_of_range():
    with pytest.raises(ValueError):
        parse_form("A", "1", "1", "1", expansion=120)


# ─── 非有限数值 / 非整数登录次数 ───

@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_import_rejects_non_finite(literal):
    """json.loads 默认接受 NaN / Infinity，导入边界必须拒绝。"""
    text = json.dumps([SAMPLE[0]], ensure_ascii=False).replace('"arr": 120000', f'"arr": {literal}')
    assert literal in text
    with pytest.raises(ImportFormatError):
        import_json(text)


def test_import_rejects_fractional_logins():
    doc = [dict(SAMPLE[0], loginsPerMonth=2.5)]
    with pytest.raises(ImportFormatError, match="loginsPerMonth"):
        import_json(json.dumps(doc))


def test_export_refuses_nan():
    with pytest.raises(ValueError):
        export_json([make_account("n", arr=float("nan"))])


@pytest.mark.parametrize("arr, duration", [
    ("inf", "1"),
    ("nan", "1"),
    ("1", "nan"),
    ("1", "-inf"),
    ("1e400", "1"),
])
def test_parse_form_rejects_non_finite(arr, duration):
    with pytest.raises(ValueError):
        parse_form("X", arr, "1", duration)


# ─── 编辑表单的整数滑块 ───

def test_unmoved_slider_keeps_fractional_probability():
    """导入的 55.5 在编辑时未拖动滑块，保存后仍为 55.5。"""
    imported = import_json(json.dumps(SAMPLE))[0]
    seed = slider_seed(imported.stakeholder_probability)
    stakeholder = resolve_probability(seed, imported.stakeholder_probability)
    edited = parse_form("Müller GmbH", "120000", "42", "1.5", "",
                        resolve_probability(70, imported.expansion_probability),
                        stakeholder, editing=imported)
    assert edited.stakeholder_probability == 55.5
    assert edited.expansion_probability == 70


def test_moved_slider_takes_new_value():
    assert resolve_probability(60, 55.5) == 60
    assert resolve_probability(40) == 40
    assert slider_seed(0) == 0
    assert slider_seed(100) == 100
