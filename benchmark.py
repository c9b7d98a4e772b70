import time
import numpy as np
from midilogger.formatters import format_key_aware_pitch
from midilogger.keys import SUPPORTED_KEYS

def run_benchmark():
    # Setup
    np.random.seed(42)
    # Generate 100,000 random (pitch, key) pairs
    pitches = np.random.randint(0, 128, size=100000)
    keys = np.random.choice(SUPPORTED_KEYS, size=100000)

    # Pre-warm
    format_key_aware_pitch(int(pitches[0]), str(keys[0]))

    # Benchmark
    start_time = time.perf_counter()
    for pitch, key in zip(pitches.tolist(), keys.tolist()):
        format_key_aware_pitch(pitch, key)
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
