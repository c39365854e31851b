"""Character, conversion, string, memory, list, printf and line-reading helpers."""