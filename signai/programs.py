"""
signai.programs

A handful of small named programs, handy for trying the analysis out from
the command line and as fixtures in the tests.

"""

from signai.syntax import Add, Assign, If, Less, Num, Read, Seq, Statement, Var, While

# read x
inputx = Read("x")
# x := x + 1
incx = Assign("x", Add(Var("x"), Num(1)))
# x := 0
p0 = Assign("x", Num(0))
# x := 1
p1 = Assign("x", Num(1))
# y := -1
p2 = Assign("y", Num(-1))
# x := 1; y := -1
p3 = Seq(p1, p2)
# while (1) x := x + y
p4 = While(Num(1), Assign("x", Add(Var("x"), Var("y"))))
# x := 1; y := -1; while (1) x := x + y
p5 = Seq(p3, p4)
# if (1) x := 0 else x := 1
p6 = If(Num(1), p0, p1)
# read x; while (x < 10) x := x + 1
p7 = Seq(inputx, While(Less(Var("x"), Num(10)), incx))

PROGRAMS: dict[str, Statement] = {
    "inputx": inputx,
    "incx": incx,
    "p0": p0,
    "p1": p1,
    "p2": p2,
    "p3": p3,
    "p4": p4,
    "p5": p5,
    "p6": p6,
    "p7": p7,
}

DEFAULT = "p5"
