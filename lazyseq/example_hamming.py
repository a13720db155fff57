from lazyseq import Forward, merge, scale, show, stream


def hamming():
    """numbers whose only prime factors are 2, 3 and 5"""
    numbers = Forward('hamming')
    return numbers.bind(stream(1, lambda: merge(scale(numbers(), 2),
                                                merge(scale(numbers(), 3),
                                                      scale(numbers(), 5)))))


if __name__ == "__main__":
    print(show(hamming(), 20))
