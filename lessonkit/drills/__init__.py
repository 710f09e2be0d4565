"""Reference solutions: quizzes, errors, tables, basics, iterators, text and models."""