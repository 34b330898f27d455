import json
import os
import sys

from formlocalizer import constants
from formlocalizer.core.localizer import Localizer


def check_translations():
    # Find the i18n directory relative to the script location
    script_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.abspath(os.path.join(script_dir, "../../..")) # src/formlocalizer/tests -> project root

    candidates = [
        os.path.join(project_root, constants.i18n.I18N_DIRNAME),
        constants.i18n.I18N_DIRNAME,
    ]

    i18n_dir = None
    for cand in candidates:
        if os.path.isdir(cand):
            i18n_dir = cand
            break

    if not i18n_dir:
        print("Error: Could not find i18n directory.")
        sys.exit(1)

    base_name = constants.i18n.pack_filename(constants.i18n.DEFAULT_LANGUAGE)
    if not os.path.exists(os.path.join(i18n_dir, base_name)):
        print(f"Error: Could not find base translation file {base_name} in {i18n_dir}")
        sys.exit(1)

    localizer = Localizer(i18n_dir)
    untranslated_report = {}
    for entry in localizer.discover():
        if entry.id == constants.i18n.DEFAULT_LANGUAGE:
            continue
        report = localizer.audit(entry.id)
        if report.missing or report.extra or report.identical:
            untranslated_report[f"{entry.id} ({entry.display_name})"] = report.to_dict()

    if untranslated_report:
        print(json.dumps(untranslated_report, indent=2, ensure_ascii=False))
    else:
        print("All translations are up to date and fully unique!")

if __name__ == "__main__":
    check_translations()
