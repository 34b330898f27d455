"""
Unit tests for comparing a pack's coverage against the base pack.
"""
from formlocalizer.core.coverage import compare_documents
from formlocalizer.core.document import ResourceDocument


def test_compare_documents_reports_missing_extra_and_identical():
    base = ResourceDocument(forms={
        "frmMain": {"btnStart": "Start", "btnStop": "Stop", "lblUnit": "MB", "lblEmpty": ""},
        "frmAbout": {"lblTitle": "About"},
    })
    pack = ResourceDocument(forms={
        "frmMain": {"btnStart": "Démarrer", "lblUnit": "MB", "lblEmpty": "", "btnOld": "Vieux"},
    })

    report = compare_documents("fr-FR", base, pack)

    assert report.language_id == "fr-FR"
    assert report.missing == {"frmAbout": ["lblTitle"], "frmMain": ["btnStop"]}
    assert report.extra == {"frmMain": ["btnOld"]}
    assert report.identical == {"frmMain": ["lblUnit"]}
    assert not report.is_complete


def test_compare_identical_key_sets_is_complete():
    base = ResourceDocument(forms={"frmMain": {"btnStart": "Start"}})
    pack = ResourceDocument(forms={"frmMain": {"btnStart": "Démarrer"}})
    report = compare_documents("fr-FR", base, pack)
    assert report.is_complete
    assert report.to_dict() == {"missing": {}, "extra": {}, "identical": {}}
