# benchkernels

A collection of small compute kernels. Each one does a fixed amount of
well-defined work and can check its own answer. They are useful for comparing
interpreters, machines or settings, and as readable reference versions of the
algorithms involved.

The package has no dependencies outside the standard library.

## Kernels

| Module                    | Work done                                                              |
|---------------------------|------------------------------------------------------------------------|
| `benchkernels.montgomery` | `(a*b)**4 mod m` on 64-bit values, plainly and by Montgomery multiplication, with a cross-check |
| `benchkernels.cubic`      | Real roots of a fixed set of cubic polynomials                         |
| `benchkernels.edn`        | Fixed-point DSP: vector multiply, dot product, FIR, IIR, lattice synthesis, codebook search, 8×8 DCT |
| `benchkernels.md5`        | MD5 of a message whose bytes count up from zero (1000 bytes by default) |
| `benchkernels.minver`     | 3×3 matrix inversion with partial pivoting, and a matrix product       |
| `benchkernels.nbody`      | Total energy of the Sun and the four gas giants                        |
| `benchkernels.sha256`     | SHA-256 of a fixed 56-byte message                                     |

Every kernel module offers the same pair of entry points:

* `run(repeat)` does the kernel's work `repeat` times (at least once, or
  `ValueError` is raised) and returns the result of the last pass;
* `verify(result)` returns `True` when that result is the known good answer.

```python
from benchkernels import cubic, edn, md5, minver, montgomery, nbody, sha256

for kernel in (montgomery, cubic, edn, md5, minver, nbody, sha256):
    result = kernel.run(1)
    assert kernel.verify(result)
```

What `run` returns differs by kernel:

* `montgomery.run` – an error flag, `0` when both methods agree;
* `cubic.run` – a `CubicResult` with the roots of the two cubics whose
  solutions are known (`first` and `second`);
* `edn.run` – an `EdnResult` holding the output buffer and the scalars `c`,
  `d` and `e`;
* `md5.run(repeat, length=1000)` – the sum of the four MD5 state words;
* `minver.run` – a `MinverResult` with `product`, `inverse` and `det`;
* `nbody.run` – a pair of the summed energy and the list of `Body` records;
* `sha256.run` – the 32-byte digest (`verify` checks its first eight bytes).

## Using the algorithms directly

The building blocks are public as well.

```python
from benchkernels import cubic, md5, sha256

cubic.solve_cubic(1.0, -10.5, 32.0, -30.0)   # a tuple of three roots

state = md5.md5(b"hello")
md5.hexdigest(state)

h = sha256.Sha256()
h.update(b"abc")
digest = h.digest(32)    # also resets the context
```

More of them:

* `montgomery.mulul64`, `modul64`, `montmul`, `xbingcd` – the 64-bit
  arithmetic behind Montgomery multiplication;
* `edn.vec_mpy1`, `mac`, `fir`, `fir_no_red_ld`, `latsynth`, `iir1`,
  `codebook`, `jpegdct` – the DSP kernels, which return new values rather
  than change their inputs;
* `minver.minver(matrix, eps)` returns `(inverse, det)` and raises
  `minver.SingularMatrixError` when a pivot is not above `eps`;
  `minver.mmul(a, b)` multiplies two matrices;
* `nbody.solar_bodies`, `offset_momentum`, `bodies_energy` and the `Body`
  record;
* `sha256.write_be32(length, words)`.

## Timing

`benchkernels.timing.Timer` measures wall-clock and CPU time between `start()`
and `stop()`, and can be used as a context manager:

```python
from benchkernels import md5
from benchkernels.timing import Timer

with Timer() as timer:
    md5.run(10, 1000)
print(timer.report())   # "Real time: ... ms CPU time: ... ms "
```

## What it does not do

There is no command-line runner, no scoring against a reference machine and
no report across kernels: the kernels are run and timed from Python as shown
above. The package does not include a CRC-32, Huffman coding or integer
matrix-multiplication kernel.