# syslab

Small, runnable models of ideas at the heart of computer systems: how
integers and floats are laid out in memory, what compiled arithmetic and
control flow compute, how an implicit free-list allocator manages a heap,
how buffered I/O copes with short counts, and how a shell starts its
children.

Everything is plain Python with no third-party dependencies.

## Command-line tools

Print signed/unsigned conversions, truncation, sign and zero extension,
and the little-endian bytes of integers and floats:

    syslab-intconv

Start a minimal interactive shell. Each line is split on spaces; a last
word beginning with `&` runs the job in the background (its pid and the
command line are printed), and `quit` exits. The program name is taken
as a path, not looked up in `PATH`, so write `/bin/ls` rather than `ls`:

    syslab-shell

The shell's pieces are also usable directly: `syslab.shell.parseline`,
`builtin_command` and `eval_line`.

## Library tour

### Data representation

```python
from syslab.intconv import to_unsigned, to_signed, int_bytes, float_bytes, show_bytes

to_unsigned(-12345, 16)   # 53191
to_signed(53191, 16)      # -12345
show_bytes(int_bytes(12345, 4))   # ' 39 30 00 00'
```

`syslab.floats` has `cel2fahr`, single-precision rounding with
`to_float32`, `funct`, classification with `find_range` and the `Range`
enum, and reinterpretation of a double's bits with `double2bits` and
`uu2double`.

### Machine-level programs

`syslab.arith`, `syslab.controlflow` and `syslab.arrays` reproduce the
results of small functions whose compiled form is worth studying, with
results wrapped to the fixed widths the machine would use:

```python
from syslab.controlflow import absdiff, rfact, switch_eg

absdiff(3, 10)      # 7
rfact(5)            # 120
switch_eg(5, 100)   # 65
```

`DiffCounter.absdiff_se` counts which branch was taken; `cmovdiff`,
`fact_do`, `fact_while` and `fact_for` show other forms. `syslab.arith`
has `arith`, `scale`, `store_uprod` (128-bit product), `remdiv`,
`mult2`, `swap_add`, `caller` and `call_proc`. `syslab.arrays` has
`fix_prod_ele`, `var_prod_ele` and `vframe`.

### A heap allocator

`syslab.memlib.MemLib` models a bounded heap grown with `sbrk` (raising
`MemoryError` when it would overflow), and `syslab.mm.Allocator` is an
implicit free list with boundary tags, first-fit placement, block
splitting and immediate coalescing:

```python
from syslab.mm import Allocator

heap = Allocator()
bp = heap.malloc(100)
heap.free(bp)
for block in heap.blocks():
    print(block)   # Block(bp=..., size=..., allocated=...)
```

### Robust I/O, unbuffered output and sockets

`syslab.rio` provides `rio_readn`, `rio_writen` and the buffered `Rio`
reader with `readnb` and `readlineb`; reads stop early only at end of
file, and writes loop until all data is out.

`syslab.sio` writes straight to file descriptor 1: `sio_puts`,
`sio_putl`, `sio_ltoa` for digits in any base from 2 to 36, and
`sio_error`, which writes a message and ends the process with status 1.

`syslab.netutil` offers `open_clientfd` and `open_listenfd`, which try
each address the resolver returns until one works and return a
`socket.socket`. Failures are raised as `socket.gaierror` or `OSError`.

### Measuring performance

`syslab.clock.CycleCounter` estimates elapsed cycles from the thread CPU
clock and the clock rate that `mhz` / `core_mhz` read from
`/proc/cpuinfo` (1000 MHz when it cannot be read). `syslab.fcyc.fcyc`
times a function with the K-best scheme of `KBestSampler`, configured by
`FcycConfig`. `syslab.cpe.find_cpe` and `find_cpe_full` fit a line
through timings over a range of counts, chosen by `SampleMethod`, and
report cycles per element using `ls_slope`, `ls_intercept` and
`ls_error` from `syslab.lsquare`.

## What is not included

Apart from the shell, the package has no process-control
demonstrations: nothing here forks children to show reaping order,
sends signals, or models non-local jumps. Errors are reported as
ordinary Python exceptions; there is no separate error-reporting module.