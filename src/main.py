import sys

from tpiece import Piece, PieceGenerator
from tqueue import CircularQueue, QueueFullError, QueueEmptyError
import global_vars as gv


def fill(queue: CircularQueue, generator: PieceGenerator) -> None:
    while not queue.is_full():
        queue.enqueue(generator.generate())


def insert_piece(queue: CircularQueue, generator: PieceGenerator, out=None) -> Piece:
    # checked before drawing so a rejected insert does not consume an id
    if queue.is_full():
        raise QueueFullError(f'preview queue is full ({queue.count}/{queue.capacity})')
    piece = generator.generate()
    queue.enqueue(piece, out)
    return piece


def play_piece(queue: CircularQueue, out=None) -> Piece:
    piece = queue.dequeue()
    print(f'>>> You played: {piece}', file=out)
    return piece


def print_menu(queue: CircularQueue, out) -> None:
    out.write(f'\n{gv.separator}\n')
    queue.render(out)
    out.write(f'{gv.separator}\n')
    out.write('Actions:\n')
    for key, label in gv.menu_options:
        out.write(f'{key} - {label}\n')
    out.write('Choice: ')


def run(queue: CircularQueue, generator: PieceGenerator, read=input, out=None) -> dict:
    """Interactive loop: show the preview, read an action, apply it.

    Returns the queue stats extended with the number of rejected inserts
    ('dropped') and rejected plays ('empty_gets').
    """
    out = sys.stdout if out is None else out
    stats = {'dropped': 0, 'empty_gets': 0}
    while True:
        print_menu(queue, out)
        try:
            choice = read().strip()
        except EOFError:
            choice = '0'

        if choice == '1':
            try:
                play_piece(queue, out)
            except QueueEmptyError:
                stats['empty_gets'] += 1
                out.write('\n[!] No pieces to play!\n')
        elif choice == '2':
            try:
                insert_piece(queue, generator, out)
            except QueueFullError:
                stats['dropped'] += 1
                out.write('\n[!] The preview queue is full! Play a piece first.\n')
        elif choice == '0':
            out.write('Exiting Tetris Stack...\n')
            break
        else:
            out.write('Invalid option.\n')

    result = queue.stats()
    result.update(stats)
    return result


def start(*, capacity: int = gv.capacity, policy: str = 'uniform', seed: int = None, kinds=None) -> tuple:
    print('--- Initializing Tetris Stack ---')
    queue = CircularQueue(capacity)
    generator = PieceGenerator(policy=policy, kinds=kinds, seed=seed)
    fill(queue, generator)
    return queue, generator


if __name__ == '__main__':
    args = {'capacity': gv.capacity, 'policy': 'uniform', 'seed': None}
    queue, generator = start(**args)
    stats = run(queue, generator)
    print(*[f'{k}: {v}' for k, v in stats.items()], sep='\n')
