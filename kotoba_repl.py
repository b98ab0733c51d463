import readline

import kotoba

PROMPT = ''

def kotoba_repl():
    print('Type "さようなら" or input an end of file (Ctrl+D) to quit.')

    m = kotoba.Machine()
    kotoba.install(m)

    cmd = input(PROMPT)
    while cmd.strip() != 'さようなら':
        print(m.eval(cmd))
        cmd = input(PROMPT)


if __name__ == '__main__':
    try:
        kotoba_repl()
    except EOFError:
        pass  # perfectly acceptable
