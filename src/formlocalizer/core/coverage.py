"""
Translation coverage of a pack relative to the base pack.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .document import ResourceDocument

KeysByForm = Dict[str, List[str]]


@dataclass
class CoverageReport:
    """Keys a pack lacks, adds, or leaves identical to the base pack, per form."""
    language_id: str
    missing: KeysByForm = field(default_factory=dict)
    extra: KeysByForm = field(default_factory=dict)
    identical: KeysByForm = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> Dict[str, KeysByForm]:
        return {"missing": self.missing, "extra": self.extra, "identical": self.identical}


def compare_documents(language_id: str, base: ResourceDocument, pack: ResourceDocument) -> CoverageReport:
    """
    Diffs `pack` against `base`. Identical values are reported separately because
    some strings (units, product names) legitimately stay untranslated.
    """
    report = CoverageReport(language_id)
    for form_id in sorted(set(base.forms) | set(pack.forms)):
        base_strings = base.forms.get(form_id, {})
        pack_strings = pack.forms.get(form_id, {})

        missing = sorted(set(base_strings) - set(pack_strings))
        extra = sorted(set(pack_strings) - set(base_strings))
        identical = sorted(
            key for key in set(base_strings) & set(pack_strings)
            if base_strings[key] == pack_strings[key] and base_strings[key].strip()
        )
        if missing:
            report.missing[form_id] = missing
        if extra:
            report.extra[form_id] = extra
        if identical:
            report.identical[form_id] = identical
    return report
