# primer

A collection of small, self-contained programs and libraries: line
counting, argument echoing, palindromes, temperature conversion, bit
counting, slices and trees, images (GIF, PNG, JPEG), fetching URLs,
displaying and deeply comparing values, and a bzip2 writer.

## Installing

    pip install .

Images are made with Pillow, which is installed along with the package.
To run the tests:

    pip install .[test]
    pytest

## Commands

Every program is installed as its own command.

Text and lines:

    primer-echo -s , -n a b c        # joins its arguments; -s separator, -n no newline
    primer-dup1 < file.txt           # counts repeated lines from standard input
    primer-dup2 a.txt b.txt          # the same, reading named files (or stdin)
    primer-dup3 a.txt b.txt          # the same, reading whole files at once
    primer-dedup < file.txt          # prints each distinct line once
    primer-charcount < file.txt      # counts Unicode characters and UTF-8 lengths
    primer-basename < paths.txt      # strips directories and the last .suffix
    primer-comma 1 12 1234567890     # inserts thousands separators
    primer-printints                 # prints [1, 2, 3]

Numbers and data structures:

    primer-boiling                   # boiling point of water in °F and °C
    primer-ftoc                      # two Fahrenheit-to-Celsius conversions
    primer-cf 32 100                 # converts each argument both ways
    primer-netflag                   # shows flag bits being set and cleared
    primer-append                    # shows how capacity grows on append
    primer-nonempty                  # drops empty strings in place
    primer-rev < numbers.txt         # reverses each line of integers
    primer-graph                     # a small directed graph and edge queries

Images:

    primer-lissajous > out.gif       # an animated Lissajous figure
    primer-lissajous web             # serves a new figure at localhost:8000
    primer-mandelbrot > out.png      # the Mandelbrot set as a 1024x1024 PNG
    primer-mandelbrot | primer-jpeg > out.jpg

`primer-jpeg` reads a PNG or JPEG image, reports the input format on
standard error and writes a JPEG of quality 95.

Network:

    primer-fetch URL...              # prints the body found at each URL
    primer-fetchall URL...           # fetches in parallel, reporting times and sizes

Compression:

    primer-bzipper < input > input.bz2

## Library use

    from primer.textutil import comma, basename
    comma("1234567")                 # '1,234,567'
    basename("a/b.c.go")             # 'b.c'

    from primer.word import is_palindrome
    is_palindrome("A man, a plan, a canal: Panama")   # True

    from primer.tempconv import Celsius, f_to_c
    str(f_to_c(212.0))               # '100°C'

    from primer.popcount import pop_count
    pop_count(0xFF)                  # 8

    from primer.treesort import tree_sort
    values = [3, 1, 2]
    tree_sort(values)                # values is now [1, 2, 3]

    from primer.equal import equal
    equal([1, 2, 3], [1, 2, 3])      # True

    from primer.format import format_any
    format_any("hi")                 # '"hi"'

    from primer.display import display
    display("x", {"a": [1, 2]})      # prints each leaf under its path

    from primer.bzip import new_writer
    import io
    buf = io.BytesIO()
    with new_writer(buf) as w:
        w.write(b"hello" * 1000)

Other modules follow the same pattern: `primer.dup` and `primer.dedup`
count and filter lines, `primer.charcount` counts characters,
`primer.slices` grows, filters, reverses and rotates lists,
`primer.graph` holds a directed graph, `primer.netflag` works with
interface flag bits, `primer.mandelbrot` and `primer.lissajous` make
images, and `primer.fetch` fetches URLs one by one or all at once.

## What it does not do

The only server in the package is the one `primer-lissajous web` starts;
there are no echo or request-dumping HTTP servers. The package does not
search an issue tracker, encode records as JSON or S-expressions, render
surfaces as SVG, or list the methods of a value.