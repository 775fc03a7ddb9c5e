import sys
import os
import json
import argparse
from collections import Counter
from tqdm import tqdm

# Add parent directory to path to import diacritic_remapper package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from diacritic_remapper import DiacriticSupport, read_translation_file

def find_translation_files(paths):
    """Expands directories into the translation files they contain."""
    files = []
    for path in paths:
        if os.path.isdir(path):
            for name in sorted(os.listdir(path)):
                if name.endswith(".properties"):
                    files.append(os.path.join(path, name))
        else:
            files.append(path)
    return files

def count_clusters(translation_paths, top_n=50):
    """
    Loads every language in turn and counts how often each combined cluster occurs.
    Any allocated placeholder char in the remapped text is counted, so a Private Use
    Area char that was already in the source and collides with one inflates that count.
    """
    support = DiacriticSupport()
    support.full_reset()
    report = {}

    for path in translation_paths:
        if not os.path.exists(path):
            print(f"Warning: Translation file not found: {path}")
            continue

        translations = read_translation_file(path)
        language = os.path.splitext(os.path.basename(path))[0]
        if not support.begin_language(translations):
            print(f"{language}: no diacritic setup, skipping.")
            continue

        cluster_counts = Counter()
        remapped = support.remap_translations(translations)
        for value in tqdm(remapped.values(), desc=f"Counting {language}"):
            for char in value:
                if char in support.alphabet:
                    cluster_counts[support.expand(char)] += 1

        support.end_language()
        report[language] = {
            "distinct_clusters": len(cluster_counts),
            "total_clusters": sum(cluster_counts.values()),
            "most_common": cluster_counts.most_common(top_n),
        }
        print(f"{language}: {len(cluster_counts)} distinct clusters.")

    print(f"Placeholders allocated overall: {len(support.alphabet)}")
    return report

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Report combined diacritic clusters per language")
    parser.add_argument("inputs", nargs="+", help="Translation files or directories of *.properties files")
    parser.add_argument("--output", default="cluster_report.json", help="Output JSON path")
    parser.add_argument("--top", type=int, default=50, help="Clusters listed per language")

    args = parser.parse_args()

    report = count_clusters(find_translation_files(args.inputs), args.top)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)
    print(f"Report written to {args.output}")
