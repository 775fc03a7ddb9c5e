import argparse
import sys
import os
import time

from tqdm import tqdm

# Try to import psutil for memory tracking
try:
    import psutil
    HAS_PSUTIL = True
except ImportError:
    HAS_PSUTIL = False

from .char_classes import CONFIG_KEYS
from .support import DiacriticSupport
from .translations import read_translation_file

def get_memory_mb():
    if HAS_PSUTIL:
        process = psutil.Process(os.getpid())
        return process.memory_info().rss / 1024 / 1024
    return 0.0

def show_placeholders(text, support):
    # Placeholders are unprintable, show their codepoint instead
    return "".join(f"<U+{ord(c):04X}>" if c in support.alphabet else c for c in text)

def collect_entries(translations, limit):
    entries = []
    for key, value in translations.items():
        if limit == 0: break
        if key in CONFIG_KEYS: continue
        entries.append(value)
        if limit > 0: limit -= 1
    return entries

def benchmark(support, entries):
    total_bytes = sum(len(value.encode('utf-8')) for value in entries)
    count = len(entries)
    total_mb = total_bytes / (1024 * 1024)
    print(f"\n--- Remap Benchmark ({count} entries, {total_mb:.2f} MB) ---")

    start_time = time.time()
    start_mem = get_memory_mb()

    for value in tqdm(entries, desc="Remapping"):
        support.remap_clusters(value)

    end_time = time.time()
    end_mem = get_memory_mb()
    duration = end_time - start_time
    if duration < 0.001: duration = 0.001

    print(f"Done in {duration:.3f}s")
    print(f"Throughput: {count / duration:.2f} entries/sec ({total_mb / duration:.2f} MB/s)")
    print(f"Mem Delta: {end_mem - start_mem:.2f} MB")
    print(f"Placeholders in use: {len(support.alphabet)}")

def verify(support, entries):
    """Remap each entry and check expanding it again gives back the original. Returns mismatch count."""
    mismatches = 0
    for value in tqdm(entries, desc="Verifying"):
        remapped = support.remap_clusters(value)
        if support.expand_text(remapped) != value:
            mismatches += 1
            print(f"Mismatch: {value!r} -> {show_placeholders(remapped, support)!r}")
    print(f"Verified {len(entries)} entries, {mismatches} mismatches.")
    return mismatches

def show(support, entries):
    for value in entries:
        remapped = support.remap_clusters(value)
        if remapped == value: continue
        print(f"Original:  {value}")
        print(f"Remapped:  {show_placeholders(remapped, support)}")
        print("-" * 40)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Diacritic cluster remapper CLI")
    parser.add_argument("--input", nargs="+", help="Translation file(s), loaded as languages in order")
    parser.add_argument("--limit", type=int, default=-1, help="Limit number of entries per file")
    parser.add_argument("--benchmark", action="store_true", help="Run benchmark mode")
    parser.add_argument("--verify", action="store_true", help="Check every remapped entry expands back to the original. "
                        "Private Use Area chars already present in the source count as placeholders if allocated")

    args = parser.parse_args(argv)

    if not args.input:
        print("Usage: python -m diacritic_remapper --input <file> [--benchmark | --verify] [options]")
        return 0

    support = DiacriticSupport()
    support.full_reset()
    total_mismatches = 0

    for filepath in args.input:
        try:
            translations = read_translation_file(filepath)
        except FileNotFoundError as e:
            print(f"Error: {e}")
            return 1
        print(f"Loaded {len(translations)} entries from {filepath}.")

        if not support.begin_language(translations):
            print(f"No diacritic setup in {filepath}, skipping.")
            continue

        entries = collect_entries(translations, args.limit)
        if args.benchmark:
            print(f"Initial Memory: {get_memory_mb():.2f} MB")
            benchmark(support, entries)
        elif args.verify:
            total_mismatches += verify(support, entries)
        else:
            show(support, entries)

        support.end_language()

    if support.is_empty():
        print("No clusters needed placeholders.")
    else:
        print(f"Next free code: U+{ord(support.next_free_code()):04X}")

    return 1 if total_mismatches else 0

if __name__ == "__main__":
    sys.exit(main())
