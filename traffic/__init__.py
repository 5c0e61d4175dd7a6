""" reading demand pairs """
