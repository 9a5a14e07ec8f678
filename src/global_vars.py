capacity = 5

kinds = ('I', 'O', 'T', 'L', 'J', 'Z', 'S')

policies = ('uniform', 'bag')

menu_options = (('1', 'Play piece (dequeue)'),
                ('2', 'Insert new piece (enqueue)'),
                ('0', 'Exit'))

separator = '=' * 28
