import rasterlabel

import numpy as np

import time

def run_sample(binary, N):
  for i in range(N):
    s = time.time()
    _, N4 = rasterlabel.connected_components(binary, connectivity=4, return_N=True)
    four_time = time.time() - s

    s = time.time()
    _, N8 = rasterlabel.connected_components(binary, connectivity=8, return_N=True)
    eight_time = time.time() - s

    mpxs = lambda t: binary.size / t / 1e6

    print(f"""
      4-connected:  {mpxs(four_time):.2f} MPx/sec ({N4} components)
      8-connected:  {mpxs(eight_time):.2f} MPx/sec ({N8} components)
    """, flush=True)

N = 3
shape = (512,512)

print("shape:", shape)

print("RANDOM NOISE p=0.5 (pathological case)")
binary = np.random.random(size=shape) < 0.5
run_sample(binary, N)

print("RANDOM NOISE p=0.6 (near percolation)")
binary = np.random.random(size=shape) < 0.6
run_sample(binary, N)

print("STRIPES")
binary = np.zeros(shape, dtype=bool)
binary[:, ::2] = True
run_sample(binary, N)

print("EMPTY")
binary = np.zeros(shape, dtype=bool)
run_sample(binary, 1)

print("SOLID ONES")
binary = np.ones(shape, dtype=bool)
run_sample(binary, 1)
