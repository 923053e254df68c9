def format_search_info(depth, score, nodes, elapsed, best_move, side):
    move_str = best_move.uci() if best_move else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    side_str = "white" if side else "black"
    return (f"search depth {depth} side {side_str} score {score} nodes {nodes} "
            f"nps {nps} time {int(elapsed * 1000)}ms bestmove {move_str}")
