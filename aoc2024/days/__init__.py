"""One module per puzzle day, 1 to 18, each with a solve(text, part) function."""