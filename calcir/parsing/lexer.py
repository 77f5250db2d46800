import rply

lg = rply.lexergenerator.LexerGenerator()

lg.add("LPAREN", r"\(")
lg.add("RPAREN", r"\)")

lg.add("PLUS", r"\+")
lg.add("MINUS", r"-")
lg.add("STAR", r"\*")
lg.add("SLASH", r"/")

lg.add("EQ", r"=")

# Integer literals and variable names are told apart only when resolved.
lg.add("OPERAND", r"[^+\-*/()=\s]+")

lg.ignore(r"\s+")

lexer = lg.build()
