import random
from pyinstrument import Profiler
from arraymap import ChainedHashMap, DynamicArray

def sort_input(n, presorted):
    values = list(range(n))
    if not presorted:
        random.Random(42).shuffle(values)
    return DynamicArray(items=values)

def benchmark_sort(n=2000):
    for presorted in (False, True):
        arr = sort_input(n, presorted)
        label = "sorted" if presorted else "shuffled"
        print(f"quick_sort on {n} {label} ints...")
        arr.quick_sort()
        assert arr.to_array() == sorted(arr.to_array())

def benchmark_put(n=200_000):
    m = ChainedHashMap()
    print(f"put {n} keys (starting from {m.bucket_count} buckets)...")
    for i in range(n):
        m.put(i, str(i))
    print(f"ended with {m.bucket_count} buckets")
    assert m.size() == n

def benchmark_large():
    profiler = Profiler()
    profiler.start()

    benchmark_sort()
    benchmark_put()
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("arraymap_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
