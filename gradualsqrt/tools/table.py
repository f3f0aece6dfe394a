"""Two-row tables of inputs and their gradual square roots.

    n        0 1 2 3 4 5 6 7 8 9
    isqrt(n) 0 1 1 1 2 2 2 2 2 3

Running this module prints the tables for every generator.
"""

from ..integral.ops import RM, DIR
from ..arithmetic import gradual


def isqrt_table(values, gen, label='isqrt(n)'):
    values = list(values)
    roots = [gen(n) for n in values]
    width = max([len(str(x)) for x in values + roots] + [1])
    head = max(len('n'), len(label))
    top = 'n'.ljust(head) + ''.join(' {:>{w}}'.format(x, w=width) for x in values)
    bottom = label.ljust(head) + ''.join(' {:>{w}}'.format(x, w=width) for x in roots)
    return top + '\n' + bottom


def demo_tables():
    up = list(range(17))
    down = list(reversed(up))
    tables = []
    for rm in (RM.FLOOR, RM.CLOSEST):
        for direction, values, init in ((DIR.CHANGING, up + down, 0),
                                        (DIR.ASCENDING, up, 0),
                                        (DIR.DESCENDING, down, 5)):
            gen = gradual.make_generator(init, rm=rm, direction=direction)
            tables.append((rm.name.lower() + ' ' + direction.name.lower(), isqrt_table(values, gen)))
    return tables


if __name__ == '__main__':
    for name, table in demo_tables():
        print(name + ':')
        print(table)
        print()
